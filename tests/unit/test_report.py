"""Unit tests for report formatting and text utilities."""

import pytest

from resumate.contexts.scoring import analyze_resume, format_feedback_report
from resumate.utils.report_formatter import Column, TableFormatter, format_weight
from resumate.utils.text_processing import (
    count_words,
    join_nonempty,
    round_half_up,
    truncate_display,
    utf16_length,
)
from resumate.utils.timestamp import format_timestamp


class TestFeedbackReport:

    @pytest.mark.unit
    def test_contains_scores_and_feedback(self, minimal_resume):
        feedback = analyze_resume(minimal_resume)

        report = format_feedback_report(feedback, resume_label="sam")

        assert "ATS COMPATIBILITY REPORT: sam" in report
        assert "Overall score: 31/100" in report
        assert feedback.overall.message in report
        assert "No work experience listed" in report
        assert "0 words (Too short)" in report
        for header in ("KEYWORDS", "FORMAT", "CONTENT", "LENGTH"):
            assert header in report

    @pytest.mark.unit
    def test_score_table_rows(self, minimal_resume):
        report = format_feedback_report(analyze_resume(minimal_resume))
        lines = report.splitlines()

        format_row = next(line for line in lines if line.startswith("Format "))
        assert "35" in format_row
        assert "25%" in format_row
        assert "3 issues" in format_row

    @pytest.mark.unit
    def test_empty_lists_shown_as_none(self, complete_resume):
        report = format_feedback_report(analyze_resume(complete_resume))

        assert "Issues:\n  - None" in report


class TestTableFormatter:

    @pytest.mark.unit
    def test_row_alignment(self):
        formatter = TableFormatter([Column("Name", 6), Column("Score", 5, ">")], total_width=12)

        formatter.add_table_header().add_row(["abc", 7])

        assert formatter.render().splitlines() == ["Name   Score", "-" * 12, "abc        7"]

    @pytest.mark.unit
    def test_row_length_mismatch(self):
        formatter = TableFormatter([Column("Name", 6)])

        with pytest.raises(ValueError, match="Expected 1 values, got 2"):
            formatter.add_row(["a", "b"])

    @pytest.mark.unit
    def test_format_weight(self):
        assert format_weight(0.3) == "30%"
        assert format_weight(0.25) == "25%"


@pytest.mark.unit
def test_text_helpers():
    assert join_nonempty(["Ada", "", None, "Lovelace"]) == "Ada Lovelace"
    assert join_nonempty([]) == ""
    assert count_words("  led   a team\nof 5 ") == 5
    assert count_words("") == 0
    assert round_half_up(30.5) == 31
    assert round_half_up(30.49) == 30
    assert utf16_length("caf\u00e9") == 4
    assert utf16_length("\U0001F680") == 2
    assert truncate_display("this is a very long string", 10) == "this is..."


@pytest.mark.unit
def test_format_timestamp():
    assert format_timestamp("2025-11-13T18:45:40.572549") == "2025-11-13 18:45:40"
    assert format_timestamp("not a timestamp") == "not a timestamp"
