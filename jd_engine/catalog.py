"""Static selector catalog, heading keywords and known job sites.

Order matters everywhere in this module: categories are tried in insertion
order and selectors within a category in list order. The first selector that
matches anything wins, so site-specific entries come before the generic ones.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence


SELECTOR_CATALOG: Dict[str, List[str]] = {
    "linkedin": [
        ".description__text",
        ".show-more-less-html__markup",
    ],
    "indeed": [
        "#jobDescriptionText",
        ".jobsearch-jobDescriptionText",
    ],
    "glassdoor": [
        ".jobDescriptionContent",
        ".desc",
        '[data-test="jobDescriptionContent"]',
    ],
    "monster": [
        ".job-description",
    ],
    "ziprecruiter": [
        ".job_description",
    ],
    # Generic fallbacks
    "generic": [
        '[data-testid="job-description"]',
        '[data-automation="jobDescription"]',
        '[class*="job-description"]',
        '[class*="jobDescription"]',
        ".description",
        ".job-details",
    ],
}

# Lowercase phrases that suggest a heading introduces the description.
KEYWORDS: List[str] = [
    "job description",
    "about the job",
    "description",
    "responsibilities",
    "requirements",
    "what you'll do",
    "what we're looking for",
]

HEADING_SELECTOR = "h1, h2, h3, h4, h5, h6, strong, b"

# URL fragment -> catalog category.
JOB_SITES: Dict[str, str] = {
    "linkedin.com/jobs": "linkedin",
    "indeed.com": "indeed",
    "glassdoor.com": "glassdoor",
    "monster.com": "monster",
    "ziprecruiter.com": "ziprecruiter",
}


def flatten_selectors(catalog: Mapping[str, Sequence[str]]) -> List[str]:
    """Flatten the catalog into one list, category-then-entry order."""
    out: List[str] = []
    for selectors in catalog.values():
        out.extend(selectors)
    return out


def detect_site(url: Optional[str], sites: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return the catalog category for a job-site URL, or None."""
    u = (url or "").lower()
    if not u:
        return None
    for fragment, category in (sites or JOB_SITES).items():
        if fragment in u:
            return category
    return None


def is_job_site(url: Optional[str]) -> bool:
    return detect_site(url) is not None
