"""Default singleton content.

Seeded into a fresh store and shown by the site whenever the service has
no value for a field.
"""

from portfolio.domain.entities import AboutContent, HeroContent, Metric


def default_hero() -> HeroContent:
    return HeroContent(
        tagline="Platform & Reliability Partner",
        headline="Make launches feel calm and repeatable.",
        subheading=(
            "I design guardrails, CI/CD, and observability stacks so engineering orgs "
            "can ship trustworthy code without firefights."
        ),
        badges=["Kubernetes Ops", "GitHub Actions", "Terraform", "SRE Coaching"],
        metrics=[
            Metric(value="40+", label="services on shared pipelines"),
            Metric(value="15", label="K8s clusters with SLOs"),
            Metric(value="<20m", label="mean recovery target"),
        ],
        primary_label="Book a working session",
        primary_url="#contact",
        secondary_label="Download résumé",
        secondary_url="assets/Aarav-Patel-Resume.pdf",
    )


def default_about() -> AboutContent:
    return AboutContent(
        heading="From command line to business outcomes.",
        summary=(
            "I focus on the engineering fundamentals that matter: maintainable automation, "
            "predictable delivery, and visibility the entire company can rely on."
        ),
        bullets=[
            "Self-documenting CI/CD blueprints",
            "Production-ready Kubernetes guardrails",
            "SLO dashboards tied to business metrics",
        ],
        photo="",
    )
