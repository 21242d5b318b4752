"""
Text report for ATS feedback.

Renders an AtsFeedback as a terminal-friendly report: a score table with
section weights, followed by the issues and suggestions of each section.
"""

from typing import Optional

from resumate.contexts.scoring.feedback import AtsFeedback
from resumate.contexts.scoring.vocabulary import SECTION_WEIGHTS
from resumate.utils.report_formatter import Column, TableFormatter, format_weight
from resumate.utils.text_processing import truncate_display

SECTION_TITLES = {
    "keywords": "Keywords",
    "format": "Format",
    "content": "Content",
    "length": "Length",
}


def format_feedback_report(feedback: AtsFeedback, resume_label: Optional[str] = None) -> str:
    """
    Format ATS feedback as a human-readable report.

    Args:
        feedback: Result of analyze_resume()
        resume_label: Optional resume name or file shown in the header

    Returns:
        Formatted report string
    """
    sections = feedback.sections

    formatter = TableFormatter(
        columns=[
            Column("Section", 12, "<"),
            Column("Score", 8, ">"),
            Column("Weight", 8, ">"),
            Column("Notes", 48, "<"),
        ],
        total_width=80,
    )

    title = "ATS COMPATIBILITY REPORT"
    if resume_label:
        title = f"{title}: {resume_label}"
    formatter.add_section_header(title)
    formatter.add_text(f"Overall score: {feedback.overall.score}/100")
    formatter.add_text(feedback.overall.message)
    formatter.add_blank_line()

    notes = {
        "keywords": f"{len(sections.keywords.found)} keywords found",
        "format": f"{len(sections.format.issues)} issues",
        "content": f"{len(sections.content.issues)} issues",
        "length": f"{sections.length.word_count} words ({sections.length.ideal})",
    }

    formatter.add_table_header()
    for name, analysis in sections.items():
        formatter.add_row(
            [
                SECTION_TITLES[name],
                analysis.score,
                format_weight(SECTION_WEIGHTS[name]),
                truncate_display(notes[name], 48),
            ]
        )
    formatter.add_blank_line()

    formatter.add_section_header("KEYWORDS")
    formatter.add_bullet_list("Found", sections.keywords.found)
    formatter.add_bullet_list("Missing", sections.keywords.missing)
    formatter.add_bullet_list("Suggestions", sections.keywords.suggestions)
    formatter.add_blank_line()

    for name in ("format", "content"):
        analysis = getattr(sections, name)
        formatter.add_section_header(SECTION_TITLES[name].upper())
        formatter.add_bullet_list("Issues", analysis.issues)
        formatter.add_bullet_list("Suggestions", analysis.suggestions)
        formatter.add_blank_line()

    formatter.add_section_header("LENGTH")
    formatter.add_text(f"Word count: {sections.length.word_count} ({sections.length.ideal})")
    formatter.add_bullet_list("Suggestions", sections.length.suggestions)

    return formatter.render()
