"""Years-of-experience heuristic over free resume text."""

import re

# "5 years", "10year", "3 Years"
EXP_YEARS_RE = re.compile(r"(\d+)\s*(?:year|years)", re.IGNORECASE)

# Word-count fallback when no explicit claim is found: (min words, years)
LENGTH_ESTIMATES: list[tuple[int, int]] = [
    (200, 5),  # extensive experience description
    (100, 3),  # moderate
]


def parse_experience_years(text: str | None) -> int:
    """Estimate years of experience from resume text.

    Uses the first explicit "N years" claim; otherwise guesses from how
    long the text is. Empty text gives 0.
    """
    if not text:
        return 0

    match = EXP_YEARS_RE.search(text)
    if match:
        return int(match.group(1))

    words = len(text.split())
    for min_words, years in LENGTH_ESTIMATES:
        if words > min_words:
            return years
    return 1
