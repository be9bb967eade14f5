"""Scores one stored resume against one job posting.

Keyword-list scoring always runs; the text matcher runs when both the
resume's raw text and the job description are available and its score
then becomes the headline ``match_score``.
"""

import logging

from models.requests import JobRecord, ResumeRecord
from models.responses import JobMatchResponse
from services.experience_parser import parse_experience_years
from services.keyword_matcher import compute_keyword_score
from services.semantic_matcher import compute_semantic_match

logger = logging.getLogger(__name__)


def match_job(resume: ResumeRecord, job: JobRecord) -> JobMatchResponse:
    keyword_score = compute_keyword_score(resume.skills, job.skills)

    details = None
    match_score = keyword_score
    if resume.raw_text and job.description:
        details = compute_semantic_match(resume.raw_text, job.description)
        match_score = details.score

    logger.debug(
        "Matched job %r: keyword=%d final=%d", job.title, keyword_score, match_score
    )
    return JobMatchResponse(
        match_score=match_score,
        keyword_score=keyword_score,
        match_details=details,
        experience_years=parse_experience_years(resume.experience or resume.raw_text),
        required_experience=job.required_experience,
    )
