"""Contact link heuristics — pick an icon and an href from free text.

Contact links are stored as plain ``title`` / ``details`` pairs, so both
the icon and the link target are inferred from the text itself.
"""

import re
from dataclasses import dataclass
from enum import Enum

_ABSOLUTE_URL = re.compile(r"^https?://\S+$", re.IGNORECASE)
_BARE_DOMAIN = re.compile(r"^(www\.)?[a-z0-9-]+(\.[a-z0-9-]+)*\.[a-z]{2,}(/\S*)?$", re.IGNORECASE)
_DIGIT_RUN = re.compile(r"\d{3,}")
_NON_DIGIT = re.compile(r"\D")
_TOKEN_PUNCTUATION = ",;()<>"

MIN_PHONE_DIGITS = 7

# Profile hosts that are links even without a path, e.g. "github.com".
KNOWN_WEB_HOSTS = frozenset(
    {
        "linkedin.com",
        "github.com",
        "gitlab.com",
        "bitbucket.org",
        "x.com",
        "twitter.com",
        "medium.com",
        "dev.to",
        "behance.net",
        "dribbble.com",
        "youtube.com",
        "instagram.com",
        "stackoverflow.com",
    }
)


class ContactIcon(str, Enum):
    LINKEDIN = "linkedin"
    GITHUB = "github"
    EMAIL = "email"
    PHONE = "phone"
    LINK = "link"


@dataclass(frozen=True)
class ContactLink:
    """Resolved presentation of a contact entry."""

    icon: ContactIcon
    label: str
    href: str | None = None
    opens_new_context: bool = False


def select_icon(title: str, details: str) -> ContactIcon:
    """Choose an icon by inspecting ``title + details`` case-insensitively.

    First match wins: linkedin, github, mail/@, phone/3+ digit run, link.
    """
    haystack = f"{title} {details}".lower()
    if "linkedin" in haystack:
        return ContactIcon.LINKEDIN
    if "github" in haystack:
        return ContactIcon.GITHUB
    if "mail" in haystack or "@" in haystack:
        return ContactIcon.EMAIL
    if "phone" in haystack or _DIGIT_RUN.search(haystack):
        return ContactIcon.PHONE
    return ContactIcon.LINK


def _tokens(text: str) -> list[str]:
    return [token.strip(_TOKEN_PUNCTUATION) for token in text.split() if token.strip(_TOKEN_PUNCTUATION)]


def _is_known_host(host: str) -> bool:
    host = host.lower().removeprefix("www.")
    return host in KNOWN_WEB_HOSTS or any(host.endswith(f".{known}") for known in KNOWN_WEB_HOSTS)


def _web_address(token: str) -> str | None:
    """Upgrade ``domain/path``, ``www.domain`` or a known profile host to https.

    A bare dotted word such as ``Next.js`` stays plain text.
    """
    if not _BARE_DOMAIN.match(token):
        return None
    host, slash, _ = token.partition("/")
    if slash or host.lower().startswith("www.") or _is_known_host(host):
        return f"https://{token}"
    return None


def resolve_href(text: str) -> str | None:
    """Resolve free text to a link target.

    Rules apply to the whole text in order: an absolute web URL is kept,
    anything with ``@`` becomes ``mailto:``, a recognisable web address is
    upgraded to ``https://`` and text holding at least seven digits becomes
    ``tel:``. Otherwise there is no href.
    """
    if not text or not text.strip():
        return None

    stripped = text.strip()
    if _ABSOLUTE_URL.match(stripped):
        return stripped

    tokens = _tokens(stripped)
    for token in tokens:
        if _ABSOLUTE_URL.match(token):
            return token

    for token in tokens:
        if "@" in token:
            return f"mailto:{token.removeprefix('mailto:')}"

    for token in tokens:
        address = _web_address(token)
        if address:
            return address

    digits = _NON_DIGIT.sub("", stripped)
    if len(digits) >= MIN_PHONE_DIGITS:
        prefix = "+" if stripped.startswith("+") else ""
        return f"tel:{prefix}{digits}"
    return None


def resolve_contact(title: str, details: str) -> ContactLink:
    """Build the rendered form of a contact entry."""
    title = (title or "").strip()
    details = (details or "").strip()

    href = resolve_href(details) or resolve_href(title)
    label = details or title
    return ContactLink(
        icon=select_icon(title, details),
        label=label,
        href=href,
        opens_new_context=bool(href and href.lower().startswith(("http://", "https://"))),
    )
