"""
Plain-text report building.

Provides aligned tables and bullet lists for scoring reports printed to a terminal.
"""

from typing import Any, List


class Column:
    """Column definition for table formatting."""

    def __init__(self, name: str, width: int, align: str = "<"):
        """
        Args:
            name: Column header name
            width: Column width in characters
            align: Alignment ('<' left, '>' right, '^' center)
        """
        self.name = name
        self.width = width
        self.align = align

    def format_header(self) -> str:
        return f"{self.name:{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        return f"{str(value):{self.align}{self.width}}"


class TableFormatter:
    """
    Builder for text reports made of headers, aligned table rows and bullet lists.

    Every add_* method returns self so calls can be chained:

        report = (
            TableFormatter([Column("Section", 12), Column("Score", 6, ">")])
            .add_section_header("ATS SCORE")
            .add_table_header()
            .add_row(["Keywords", 80])
            .render()
        )
    """

    def __init__(self, columns: List[Column], total_width: int = 80):
        """
        Args:
            columns: List of Column definitions
            total_width: Total report width for separators
        """
        self.columns = columns
        self.total_width = total_width
        self.lines: List[str] = []

    def add_section_header(self, title: str) -> "TableFormatter":
        """Add a title framed by separator lines."""
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_table_header(self) -> "TableFormatter":
        """Add a row of column names followed by a dashed rule."""
        self.lines.append(" ".join(col.format_header() for col in self.columns))
        return self.add_separator("-")

    def add_separator(self, char: str = "-") -> "TableFormatter":
        self.lines.append(char * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add data row with column values.

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        self.lines.append(" ".join(col.format_value(val) for col, val in zip(self.columns, values)))
        return self

    def add_bullet_list(self, title: str, items: List[str], empty_text: str = "None") -> "TableFormatter":
        """
        Add a titled bullet list.

        Args:
            title: Label printed above the bullets
            items: Bullet texts, in order
            empty_text: Printed as the only bullet when items is empty
        """
        self.lines.append(f"{title}:")
        for item in items or [empty_text]:
            self.lines.append(f"  - {item}")
        return self

    def add_blank_line(self) -> "TableFormatter":
        self.lines.append("")
        return self

    def add_text(self, text: str) -> "TableFormatter":
        self.lines.append(text)
        return self

    def render(self) -> str:
        return "\n".join(self.lines)


def format_weight(weight: float) -> str:
    """
    Format a fractional weight as a whole percentage.

    Example:
        >>> format_weight(0.25)
        '25%'
    """
    return f"{weight * 100:.0f}%"
