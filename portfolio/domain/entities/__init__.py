from .hero import HeroContent, Metric
from .about import AboutContent
from .project import Project
from .skill import Skill
from .blog import Blog
from .certification import Certification
from .featured_skill import FeaturedSkill
from .section import ContentSection

__all__ = [
    "HeroContent",
    "Metric",
    "AboutContent",
    "Project",
    "Skill",
    "Blog",
    "Certification",
    "FeaturedSkill",
    "ContentSection",
]
