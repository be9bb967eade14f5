"""Skill-list overlap scoring between a resume and a job posting."""

import logging
from collections.abc import Sequence

from services.text_processing import TextAnalyzer, percentage

logger = logging.getLogger(__name__)


def _skills_match(job_skill: str, resume_skill: str) -> bool:
    """Equal, or either normalized skill contains the other ("react" in "react nativ").

    A blank resume skill normalizes to "" and so matches every job skill.
    """
    return (
        resume_skill == job_skill
        or job_skill in resume_skill
        or resume_skill in job_skill
    )


def count_matched_skills(
    resume_skills: Sequence[str],
    job_skills: Sequence[str],
    analyzer: TextAnalyzer | None = None,
) -> int:
    """Count job skills satisfied by at least one resume skill.

    Duplicate job skills are counted once per occurrence.
    """
    analyzer = analyzer or TextAnalyzer()
    normalized_resume = [analyzer.normalize_skill(s) for s in resume_skills]
    normalized_job = [analyzer.normalize_skill(s) for s in job_skills]

    matched = 0
    for job_skill in normalized_job:
        if any(_skills_match(job_skill, rs) for rs in normalized_resume):
            matched += 1
    return matched


def compute_keyword_score(
    resume_skills: Sequence[str] | None,
    job_skills: Sequence[str] | None,
) -> int:
    """Percentage (0-100) of job skills found in the resume skill list.

    Never raises: empty input and internal failures both score 0.
    """
    try:
        if isinstance(resume_skills, str) or isinstance(job_skills, str):
            raise TypeError("skill lists must be sequences of strings, not str")
        if not resume_skills or not job_skills:
            return 0
        matched = count_matched_skills(resume_skills, job_skills)
        return percentage(matched, len(job_skills))
    except Exception as e:
        logger.error("Error calculating keyword match: %s", e)
        return 0
