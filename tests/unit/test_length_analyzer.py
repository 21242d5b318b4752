"""Unit tests for word count banding."""

import pytest

from resumate.contexts.intake.resume_content import ResumeContent
from resumate.contexts.scoring.length_analyzer import analyze_length, score_word_count


@pytest.mark.unit
@pytest.mark.parametrize(
    "word_count, expected_score, expected_ideal",
    [
        (0, 40, "Too short"),
        (150, 40, "Too short"),
        (199, 40, "Too short"),
        (200, 70, "Could be longer"),
        (300, 70, "Could be longer"),
        (399, 70, "Could be longer"),
        (400, 100, "Perfect length"),
        (500, 100, "Perfect length"),
        (600, 100, "Perfect length"),
        (601, 90, "Good length"),
        (700, 90, "Good length"),
        (800, 90, "Good length"),
        (801, 75, "Consider shortening"),
        (900, 75, "Consider shortening"),
    ],
)
def test_score_word_count_bands(word_count, expected_score, expected_ideal):
    score, ideal, _ = score_word_count(word_count)

    assert score == expected_score
    assert ideal == expected_ideal


@pytest.mark.unit
def test_band_suggestions():
    assert len(score_word_count(150)[2]) == 2
    assert score_word_count(300)[2] == ["Consider adding more details to strengthen your resume"]
    assert score_word_count(500)[2] == []
    assert score_word_count(700)[2] == []
    assert score_word_count(900)[2] == [
        "Try to keep resume concise while maintaining key information"
    ]


class TestAnalyzeLength:

    @pytest.mark.unit
    def test_empty_resume_has_zero_words(self):
        result = analyze_length(ResumeContent())

        assert result.word_count == 0
        assert result.score == 40
        assert result.ideal == "Too short"

    @pytest.mark.unit
    def test_counts_extracted_words(self, make_resume):
        data = make_resume(summary=" ".join(["word"] * 450))
        data["personalInfo"]["firstName"] = "Sam"

        result = analyze_length(ResumeContent.from_dict(data))

        assert result.word_count == 451
        assert result.score == 100
        assert result.to_dict()["wordCount"] == 451

    @pytest.mark.unit
    def test_contact_details_not_counted(self, minimal_resume):
        result = analyze_length(ResumeContent.from_dict(minimal_resume))

        assert result.word_count == 0
