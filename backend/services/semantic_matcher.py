"""Free-text resume vs. job-description keyword matching.

Pipeline:
1. Tokenize both texts (lowercase word tokens)
2. Extract candidate keywords from the JD (length > 3, not a stop word, unique)
3. Mark each keyword matched if it, or its Porter stem, appears in the resume
4. Score = matched / candidates, plus banded feedback text

``analyze`` returns an explicit outcome and may raise; ``compute_semantic_match``
is the boundary that always hands back a ``SemanticMatchResult``.
"""

import logging
from dataclasses import dataclass, field

from models.responses import SemanticMatchResult
from services.text_processing import TextAnalyzer, percentage

logger = logging.getLogger(__name__)

STOP_WORDS: frozenset[str] = frozenset({
    "and", "the", "for", "with", "this",
    "that", "have", "will", "from", "your",
})

MIN_KEYWORD_LENGTH = 4
MAX_MISSING_KEYWORDS = 10
FEEDBACK_KEYWORD_COUNT = 5

MISSING_DATA_FEEDBACK = "Could not analyze due to missing data."
ERROR_FEEDBACK = "An error occurred during analysis."

# (minimum score, message), checked highest first
FEEDBACK_BANDS: list[tuple[int, str]] = [
    (90, "Excellent match! Your profile strongly aligns with this job's requirements."),
    (75, "Good match. You have most of the skills required for this position."),
    (50, "Moderate match. Consider emphasizing relevant skills in your application."),
    (30, "Basic match. This role may require additional skills not prominent in your resume."),
]
LOW_MATCH_FEEDBACK = (
    "Lower match. This position may be seeking a different skill set "
    "than what's highlighted in your resume."
)


@dataclass(frozen=True)
class Scored:
    score: int
    matched: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Degraded:
    reason: str


MatchOutcome = Scored | Degraded


def extract_candidate_keywords(job_tokens: list[str]) -> list[str]:
    """Unique salient JD tokens, in order of first occurrence."""
    seen: set[str] = set()
    keywords = []
    for token in job_tokens:
        if len(token) < MIN_KEYWORD_LENGTH or token in STOP_WORDS or token in seen:
            continue
        seen.add(token)
        keywords.append(token)
    return keywords


def partition_keywords(
    keywords: list[str],
    resume_tokens: list[str],
    analyzer: TextAnalyzer,
) -> tuple[list[str], list[str]]:
    """Split keywords into (matched, missing) by literal or stemmed presence."""
    resume_literal = set(resume_tokens)
    resume_stems = {analyzer.stem(t) for t in resume_literal}

    matched = []
    missing = []
    for kw in keywords:
        if kw in resume_literal or analyzer.stem(kw) in resume_stems:
            matched.append(kw)
        else:
            missing.append(kw)
    return matched, missing


def generate_feedback(score: int, missing_keywords: list[str]) -> str:
    feedback = LOW_MATCH_FEEDBACK
    for threshold, message in FEEDBACK_BANDS:
        if score >= threshold:
            feedback = message
            break

    if missing_keywords:
        top = ", ".join(missing_keywords[:FEEDBACK_KEYWORD_COUNT])
        feedback += f" Consider adding these keywords to your resume: {top}."
    return feedback


def analyze(
    resume_text: str | None,
    job_description: str | None,
    analyzer: TextAnalyzer | None = None,
) -> MatchOutcome:
    """Match resume text against JD keywords. May raise on malformed input."""
    if not resume_text or not job_description:
        return Degraded(MISSING_DATA_FEEDBACK)

    analyzer = analyzer or TextAnalyzer()
    resume_tokens = analyzer.tokenize(resume_text)
    job_tokens = analyzer.tokenize(job_description)

    keywords = extract_candidate_keywords(job_tokens)
    matched, missing = partition_keywords(keywords, resume_tokens, analyzer)
    return Scored(
        score=percentage(len(matched), len(keywords)),
        matched=matched,
        missing=missing,
    )


def to_result(outcome: MatchOutcome) -> SemanticMatchResult:
    if isinstance(outcome, Degraded):
        return SemanticMatchResult(feedback=outcome.reason, degraded=True)

    return SemanticMatchResult(
        score=outcome.score,
        match_percentage=outcome.score,
        matched_keywords=outcome.matched,
        missing_keywords=outcome.missing[:MAX_MISSING_KEYWORDS],
        feedback=generate_feedback(outcome.score, outcome.missing),
    )


def compute_semantic_match(
    resume_text: str | None, job_description: str | None
) -> SemanticMatchResult:
    """Keyword-level match of resume text to a JD. Never raises."""
    try:
        outcome = analyze(resume_text, job_description)
    except Exception:
        logger.exception("Error in semantic job matching")
        outcome = Degraded(ERROR_FEEDBACK)

    if isinstance(outcome, Degraded) and outcome.reason == MISSING_DATA_FEEDBACK:
        logger.warning("Missing resume text or job description")
    return to_result(outcome)
