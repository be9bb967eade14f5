"""Tests for the free-text resume/JD matcher."""

import pytest

from models.responses import SemanticMatchResult
from services import semantic_matcher
from services.semantic_matcher import (
    ERROR_FEEDBACK,
    MISSING_DATA_FEEDBACK,
    Degraded,
    Scored,
    analyze,
    compute_semantic_match,
    extract_candidate_keywords,
    generate_feedback,
    partition_keywords,
)
from services.text_processing import TextAnalyzer


class TestMissingInput:
    def test_empty_resume(self):
        result = compute_semantic_match("", "some text")
        assert result.score == 0
        assert result.feedback == MISSING_DATA_FEEDBACK
        assert result.matched_keywords == []
        assert result.missing_keywords == []
        assert result.degraded is True

    def test_empty_job_description(self):
        result = compute_semantic_match("text", "")
        assert result.score == 0
        assert result.feedback == "Could not analyze due to missing data."

    def test_none_inputs(self):
        assert compute_semantic_match(None, "Python").feedback == MISSING_DATA_FEEDBACK
        assert compute_semantic_match("Python", None).feedback == MISSING_DATA_FEEDBACK

    def test_analyze_reports_degraded(self):
        assert analyze("", "python") == Degraded(MISSING_DATA_FEEDBACK)


class TestKeywordExtraction:
    def test_filters_short_tokens_and_stop_words(self):
        tokens = ["the", "python", "and", "with", "api", "your", "docker"]
        assert extract_candidate_keywords(tokens) == ["python", "docker"]

    def test_deduplicates_in_first_occurrence_order(self):
        tokens = ["react", "docker", "react", "python", "docker"]
        assert extract_candidate_keywords(tokens) == ["react", "docker", "python"]

    def test_only_stop_words_gives_no_keywords(self):
        analyzer = TextAnalyzer()
        tokens = analyzer.tokenize("the and for a is")
        assert extract_candidate_keywords(tokens) == []

    def test_punctuation_is_not_part_of_keywords(self):
        analyzer = TextAnalyzer()
        tokens = analyzer.tokenize("Python, Docker; (Kubernetes).")
        assert extract_candidate_keywords(tokens) == ["python", "docker", "kubernetes"]


class TestPartition:
    def test_literal_and_stemmed_matches(self):
        analyzer = TextAnalyzer()
        resume_tokens = analyzer.tokenize("Senior engineer who tested deployments")
        matched, missing = partition_keywords(
            ["engineering", "testing", "deployment", "kubernetes"], resume_tokens, analyzer
        )
        assert matched == ["engineering", "testing", "deployment"]
        assert missing == ["kubernetes"]


class TestSemanticMatch:
    def test_stemmed_equality_counts_as_match(self):
        result = compute_semantic_match(
            "Senior software engineer", "Software engineering"
        )
        assert "engineering" in result.matched_keywords
        assert result.score == 100

    def test_partial_match_score_and_feedback(self):
        result = compute_semantic_match(
            "Python developer with Docker experience",
            "Python, Docker, Kubernetes",
        )
        assert result.matched_keywords == ["python", "docker"]
        assert result.missing_keywords == ["kubernetes"]
        assert result.score == 67
        assert result.match_percentage == result.score
        assert result.feedback == (
            "Moderate match. Consider emphasizing relevant skills in your application."
            " Consider adding these keywords to your resume: kubernetes."
        )
        assert result.degraded is False

    def test_no_candidate_keywords_scores_zero(self):
        result = compute_semantic_match("Python developer", "the and for a is")
        assert result.score == 0
        assert result.matched_keywords == []
        assert result.missing_keywords == []
        assert result.feedback.startswith("Lower match.")
        assert "Consider adding" not in result.feedback

    def test_missing_keywords_truncated_to_ten(self):
        jd = " ".join(f"skill{i}" for i in range(15))
        result = compute_semantic_match("nothing relevant here", jd)
        assert len(result.missing_keywords) == 10
        assert result.missing_keywords == [f"skill{i}" for i in range(10)]
        assert result.feedback.endswith(
            "Consider adding these keywords to your resume: "
            "skill0, skill1, skill2, skill3, skill4."
        )

    def test_full_match_has_no_keyword_suggestion(self):
        result = compute_semantic_match(
            "Python Django PostgreSQL", "Python, Django and PostgreSQL"
        )
        assert result.score == 100
        assert result.feedback == (
            "Excellent match! Your profile strongly aligns with this job's requirements."
        )

    def test_analyze_returns_scored(self):
        outcome = analyze("python docker", "python kubernetes", analyzer=TextAnalyzer())
        assert outcome == Scored(score=50, matched=["python"], missing=["kubernetes"])

    def test_deterministic(self):
        resume = "Built data pipelines in Python and Spark."
        jd = "Data engineer: Python, Spark, Airflow, pipelines."
        assert compute_semantic_match(resume, jd) == compute_semantic_match(resume, jd)


class TestErrorBoundary:
    def test_non_string_input_degrades(self):
        result = compute_semantic_match(12345, "Python developer")
        assert isinstance(result, SemanticMatchResult)
        assert result.score == 0
        assert result.feedback == ERROR_FEEDBACK
        assert result.degraded is True

    def test_internal_failure_degrades(self, monkeypatch):
        def boom(*args, **kwargs):
            raise RuntimeError("tokenizer exploded")

        monkeypatch.setattr(semantic_matcher, "analyze", boom)
        result = compute_semantic_match("Python", "Python")
        assert result.score == 0
        assert result.matched_keywords == []
        assert result.missing_keywords == []
        assert result.feedback == "An error occurred during analysis."


class TestFeedback:
    @pytest.mark.parametrize(
        "score, prefix",
        [
            (100, "Excellent match!"),
            (92, "Excellent match!"),
            (90, "Excellent match!"),
            (89, "Good match."),
            (75, "Good match."),
            (74, "Moderate match."),
            (60, "Moderate match."),
            (50, "Moderate match."),
            (49, "Basic match."),
            (30, "Basic match."),
            (29, "Lower match."),
            (10, "Lower match."),
            (0, "Lower match."),
        ],
    )
    def test_bands(self, score, prefix):
        assert generate_feedback(score, []).startswith(prefix)

    def test_suggests_first_five_missing(self):
        missing = ["aaaa", "bbbb", "cccc", "dddd", "eeee", "ffff"]
        feedback = generate_feedback(40, missing)
        assert feedback.endswith(
            " Consider adding these keywords to your resume: aaaa, bbbb, cccc, dddd, eeee."
        )
        assert "ffff" not in feedback
