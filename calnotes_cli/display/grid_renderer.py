"""Rich table renderer for the month grid."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from calnotes.constants import GRID_SIZE, WEEKDAY_LABELS
from calnotes.models.calendar import CalendarDayCell
from calnotes_cli.display.console import console as shared_console


class GridRenderer:
    """Render a 42-cell month grid as six weeks of seven columns.

    Styles:
    - Days of adjacent months: dim
    - Today: bold cyan
    - Selected date: reverse
    - Dates with notes: yellow dot after the day number
    """

    def __init__(self, console: Console | None = None):
        self.console = console or shared_console

    def render(self, cells: list[CalendarDayCell], title: str) -> None:
        table = Table(title=title, show_header=True, header_style="bold", box=None)
        for label in WEEKDAY_LABELS:
            table.add_column(label, justify="right", min_width=4)

        for start in range(0, GRID_SIZE, 7):
            table.add_row(*(self.format_cell(c) for c in cells[start : start + 7]))

        self.console.print(table)

    @staticmethod
    def format_cell(cell: CalendarDayCell) -> Text:
        styles = []
        if not cell.is_current_month:
            styles.append("dim")
        if cell.is_today:
            styles.append("bold cyan")
        if cell.is_selected:
            styles.append("reverse")

        text = Text(str(cell.day_number), style=" ".join(styles))
        text.append("•" if cell.has_notes else " ", style="yellow")
        return text
