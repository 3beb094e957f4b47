"""Rich renderer for the notes of a date."""

from rich.console import Console
from rich.markup import escape

from calnotes.dates import format_date_fr, format_time_fr
from calnotes.models.note import Note
from calnotes_cli.display.console import console as shared_console


class NoteRenderer:
    """Render notes newest first, with title, time and content."""

    def __init__(self, console: Console | None = None):
        self.console = console or shared_console

    def render(self, date_key: str, notes: list[Note]) -> None:
        self.console.print(f"\n[bold]Notes pour le {format_date_fr(date_key)}[/bold]")
        if not notes:
            self.console.print("[dim]Aucune note pour cette date[/dim]")
            return

        for note in notes:
            time_label = format_time_fr(note.created_at)
            self.console.print(
                f"\n[cyan]{escape(note.title)}[/cyan] [dim]{time_label}  #{note.id}[/dim]"
            )
            self.console.print(f"  {escape(note.content)}")

        count = len(notes)
        self.console.print(f"\n[dim]{count} note{'s' if count != 1 else ''}[/dim]")
