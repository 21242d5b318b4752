"""Unit tests for analysis records and the attempt quota."""

from datetime import datetime

import pytest

from resumate.contexts.scoring import analyze_resume
from resumate.contexts.tracking import (
    MAX_ATS_ATTEMPTS,
    AtsAnalysisRecord,
    AttemptLimitExceededError,
    check_attempts_remaining,
    collect_suggestions,
    remaining_attempts,
)


@pytest.fixture
def minimal_feedback(minimal_resume):
    return analyze_resume(minimal_resume)


class TestAttemptQuota:

    @pytest.mark.unit
    def test_remaining_attempts(self):
        assert MAX_ATS_ATTEMPTS == 5
        assert remaining_attempts(0) == 5
        assert remaining_attempts(4) == 1
        assert remaining_attempts(7) == 0
        assert remaining_attempts(None) == 5

    @pytest.mark.unit
    def test_last_attempt_allowed(self):
        check_attempts_remaining(4)

    @pytest.mark.unit
    def test_limit_reached(self):
        with pytest.raises(AttemptLimitExceededError) as exc_info:
            check_attempts_remaining(5, resume_id="a1b2c3")

        error = exc_info.value
        assert error.attempts_used == 5
        assert error.max_attempts == 5
        assert str(error) == "Maximum ATS analysis attempts reached (5/5) for resume a1b2c3"

    @pytest.mark.unit
    def test_custom_limit(self):
        with pytest.raises(AttemptLimitExceededError, match=r"\(2/2\)$"):
            check_attempts_remaining(2, max_attempts=2)


class TestAtsAnalysisRecord:

    @pytest.mark.unit
    def test_from_feedback(self, minimal_feedback):
        record = AtsAnalysisRecord.from_feedback("a1b2c3", minimal_feedback, attempts_used=2)

        assert record.resume_id == "a1b2c3"
        assert record.score == minimal_feedback.overall.score == 31
        assert record.feedback == minimal_feedback.to_dict()
        assert record.keywords == minimal_feedback.to_dict()["sections"]["keywords"]
        datetime.fromisoformat(record.created_at)

    @pytest.mark.unit
    def test_refused_when_quota_used(self, minimal_feedback):
        with pytest.raises(AttemptLimitExceededError):
            AtsAnalysisRecord.from_feedback("a1b2c3", minimal_feedback, attempts_used=5)

    @pytest.mark.unit
    def test_suggestions_in_section_order(self, minimal_feedback):
        sections = minimal_feedback.sections
        expected = (
            sections.keywords.suggestions
            + sections.format.suggestions
            + sections.content.suggestions
            + sections.length.suggestions
        )

        assert collect_suggestions(minimal_feedback) == expected
        assert expected[0] == "Consider adding more industry-specific keywords"
        assert expected[-1] == "Add more relevant experience and achievements"

    @pytest.mark.unit
    def test_to_dict_keys(self, minimal_feedback):
        payload = AtsAnalysisRecord.from_feedback("a1b2c3", minimal_feedback).to_dict()

        assert list(payload) == [
            "resumeId",
            "score",
            "feedback",
            "keywords",
            "suggestions",
            "createdAt",
        ]
        assert payload["resumeId"] == "a1b2c3"
