from pydantic import BaseModel


class KeywordMatchResponse(BaseModel):
    score: int = 0


class SemanticMatchResult(BaseModel):
    score: int = 0
    match_percentage: int = 0
    matched_keywords: list[str] = []
    missing_keywords: list[str] = []  # at most 10, extraction order
    feedback: str = ""
    degraded: bool = False


class JobMatchResponse(BaseModel):
    match_score: int = 0
    keyword_score: int = 0
    match_details: SemanticMatchResult | None = None
    experience_years: int = 0
    required_experience: int | None = None
