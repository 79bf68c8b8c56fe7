"""Heuristic entity extraction from resume text.

Each extractor is a pure function over the plain text so it can be tested on
literal strings. Nothing here calls out to the network.
"""

import re

from models.schemas.resume import BasicExtraction, ContactLinks

# Known skill vocabulary. Matching is a case-insensitive substring test with no
# word boundaries, so "Java" also matches inside "JavaScript".
KNOWN_SKILLS: tuple[str, ...] = (
    "JavaScript", "TypeScript", "Python", "Java", "C++", "C#", "Ruby", "Go", "Rust",
    "PHP", "Swift", "Kotlin",
    "React", "Angular", "Vue", "Next.js", "HTML", "CSS", "SASS", "Tailwind",
    "Bootstrap", "jQuery",
    "Node.js", "Express", "Django", "Flask", "Spring", "FastAPI", "Rails", "Laravel",
    "ASP.NET",
    "MongoDB", "PostgreSQL", "MySQL", "Redis", "SQLite", "Oracle", "SQL Server",
    "Firebase", "DynamoDB",
    "AWS", "Azure", "GCP", "Docker", "Kubernetes", "Jenkins", "CI/CD", "Terraform",
    "Ansible",
    "Git", "GitHub", "GitLab", "Jira", "Agile", "Scrum", "REST API", "GraphQL",
    "Microservices",
    "Machine Learning", "Deep Learning", "TensorFlow", "PyTorch", "Pandas", "NumPy",
    "React Native", "Flutter", "iOS", "Android",
    "Linux", "Unix", "Bash", "PowerShell",
)

EMAIL_RE = re.compile(r"[\w.-]+@[\w.-]+\.\w+")
PHONE_RE = re.compile(r"(\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")

# ---------------------------------------------------------------------------
# Professional links: one pattern per platform, first match wins
# ---------------------------------------------------------------------------
_PLATFORM_PATTERNS: dict[str, re.Pattern] = {
    "linkedin": re.compile(r"(?:https?://)?(?:www\.)?linkedin\.com/in/[\w-]+/?", re.IGNORECASE),
    "github": re.compile(r"(?:https?://)?(?:www\.)?github\.com/[\w-]+/?", re.IGNORECASE),
    "twitter": re.compile(r"(?:https?://)?(?:www\.)?(?:twitter\.com|x\.com)/[\w-]+/?", re.IGNORECASE),
    "behance": re.compile(r"(?:https?://)?(?:www\.)?behance\.net/[\w-]+/?", re.IGNORECASE),
    "dribbble": re.compile(r"(?:https?://)?(?:www\.)?dribbble\.com/[\w-]+/?", re.IGNORECASE),
}

# Broad personal-site heuristic; can pick up any domain-like substring
PORTFOLIO_RE = re.compile(
    r"(?:https?://)?(?:www\.)?[\w-]+\.(?:dev|io|me|com|co|tech|design|portfolio)(?:/[\w-]*)?",
    re.IGNORECASE,
)
PORTFOLIO_EXCLUDE = ("linkedin", "github", "twitter", "facebook", "rapidapi", "google")

_LINK_ORDER = ("linkedin", "github", "portfolio", "twitter", "behance", "dribbble")

# ---------------------------------------------------------------------------
# Location: tried in order, first usable match wins
# ---------------------------------------------------------------------------
_LOCATION_LABEL = r"(?:located?\s*(?:in|at)?|address|location|based\s*in|living\s*in)"
_LOCATION_PATTERNS: tuple[re.Pattern, ...] = (
    # "Location: Austin, Texas" / "Based in Berlin, Germany"
    re.compile(
        rf"(?i:{_LOCATION_LABEL})[:\s]*"
        r"([A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)*,[ \t]*[A-Z][A-Za-z \t]+)"
    ),
    # "Austin, TX"
    re.compile(r"([A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)*,[ \t]*[A-Z]{2})\b"),
    re.compile(
        r"\b(New York|Los Angeles|San Francisco|Chicago|Boston|Seattle|Austin|Denver|"
        r"Atlanta|Dallas|Houston|Miami|Washington D\.?C\.?|London|Toronto|Sydney|"
        r"Melbourne|Berlin|Paris|Singapore|Dubai|Mumbai|Bangalore|Karachi|Lahore|"
        r"Islamabad|Rawalpindi|Faisalabad|Peshawar)\b",
        re.IGNORECASE,
    ),
)
_LOCATION_PREFIX_RE = re.compile(rf"^{_LOCATION_LABEL}[:\s]*", re.IGNORECASE)


def _with_scheme(url: str) -> str:
    return url if url.lower().startswith("http") else "https://" + url


def extract_skills(text: str) -> list[str]:
    """Known skills whose lower-cased name occurs anywhere in the text.

    Returned in vocabulary order, without duplicates.
    """
    lower = text.lower()
    found = [skill for skill in KNOWN_SKILLS if skill.lower() in lower]
    return list(dict.fromkeys(found))


def extract_email(text: str) -> str | None:
    match = EMAIL_RE.search(text)
    return match.group() if match else None


def extract_phone(text: str) -> str | None:
    match = PHONE_RE.search(text)
    return match.group() if match else None


def extract_portfolio(text: str) -> str | None:
    for match in PORTFOLIO_RE.finditer(text):
        candidate = match.group()
        lower = candidate.lower()
        if any(excluded in lower for excluded in PORTFOLIO_EXCLUDE):
            continue
        return _with_scheme(candidate)
    return None


def extract_links(text: str) -> ContactLinks:
    """Professional links (LinkedIn, GitHub, portfolio, Twitter/X, Behance, Dribbble)."""
    links: dict[str, str] = {}
    for kind in _LINK_ORDER:
        if kind == "portfolio":
            url = extract_portfolio(text)
        else:
            match = _PLATFORM_PATTERNS[kind].search(text)
            url = _with_scheme(match.group()) if match else None
        if url:
            links[kind] = url
    return ContactLinks(**links)


def extract_location(text: str) -> str | None:
    """Best-guess candidate location, or None.

    Only the first match of each pattern is considered; it is used if its
    cleaned length is strictly between 3 and 50 characters.
    """
    for pattern in _LOCATION_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        location = _LOCATION_PREFIX_RE.sub("", match.group(1).strip()).strip()
        if 3 < len(location) < 50:
            return location
    return None


def extract_basic(text: str) -> BasicExtraction:
    return BasicExtraction(
        skills=extract_skills(text),
        email=extract_email(text),
        phone=extract_phone(text),
        links=extract_links(text),
        location=extract_location(text),
    )
