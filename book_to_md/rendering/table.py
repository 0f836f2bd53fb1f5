"""GitHub-flavored Markdown table rendering."""

from typing import Optional

from ..processing.models import Table, TableCell
from .config import RenderConfig
from .paragraph import ParagraphRenderer


class TableRenderer:
    """Converts a table grid into a pipe table.

    The first row is used as the header. Rows shorter than the widest row
    are padded with empty cells.
    """

    def __init__(
        self,
        paragraphs: ParagraphRenderer,
        config: Optional[RenderConfig] = None
    ):
        """Initialize the renderer.

        Args:
            paragraphs: Renderer used for the inline content of cells.
            config: Render configuration.
        """
        self.paragraphs = paragraphs
        self.config = config or RenderConfig()

    def cell_text(self, cell: TableCell) -> str:
        """Flatten a cell into one line of inline Markdown.

        Args:
            cell: The table cell.

        Returns:
            Non-empty paragraph texts joined with the cell separator.
        """
        separator = self.config.cell_separator
        parts = []
        for paragraph in cell.paragraphs:
            text = self.paragraphs.render_inline(paragraph).strip()
            if text:
                parts.append(text.replace("\n", separator))
        return separator.join(parts)

    def render_table(self, table: Table) -> str:
        rows = [[self.cell_text(cell) for cell in row.cells] for row in table.rows]
        return self.render(rows)

    def render(self, rows: list[list[str]]) -> str:
        """Render rows of cell text as a Markdown table.

        Args:
            rows: Cell text per row.

        Returns:
            The table followed by a blank line, or an empty string when no
            row has any cells.
        """
        rows = [row for row in rows if row]
        if not rows:
            return ""

        col_count = max(len(row) for row in rows)

        lines = []
        for i, row in enumerate(rows):
            cells = list(row) + [""] * (col_count - len(row))
            lines.append("|" + "".join(f" {cell} |" for cell in cells))
            if i == 0:
                lines.append("|" + " --- |" * col_count)

        return "\n".join(lines) + "\n\n"
