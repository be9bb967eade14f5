from pydantic import BaseModel, Field, field_validator

from config import settings


def split_skills(value):
    """Accept a comma-separated skill string as well as a list."""
    if isinstance(value, str):
        return [s.strip() for s in value.split(",") if s.strip()]
    return value


class KeywordMatchRequest(BaseModel):
    resume_skills: list[str] = Field(default_factory=list, max_length=500)
    job_skills: list[str] = Field(default_factory=list, max_length=500)

    @field_validator("resume_skills", "job_skills", mode="before")
    @classmethod
    def parse_skills(cls, value):
        return split_skills(value)


class SemanticMatchRequest(BaseModel):
    resume_text: str = Field("", max_length=settings.max_resume_chars, description="Plain text resume content")
    job_description: str = Field("", max_length=settings.max_job_description_chars, description="Job description text")


class ResumeRecord(BaseModel):
    """Stored resume fields the matcher reads."""
    skills: list[str] = []
    raw_text: str = Field("", max_length=settings.max_resume_chars)
    experience: str = ""

    @field_validator("skills", mode="before")
    @classmethod
    def parse_skills(cls, value):
        return split_skills(value)


class JobRecord(BaseModel):
    """Stored job-posting fields the matcher reads."""
    title: str = ""
    description: str = Field("", max_length=settings.max_job_description_chars)
    skills: list[str] = []
    required_experience: int | None = None

    @field_validator("skills", mode="before")
    @classmethod
    def parse_skills(cls, value):
        return split_skills(value)


class JobMatchRequest(BaseModel):
    resume: ResumeRecord
    job: JobRecord
