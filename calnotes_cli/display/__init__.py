"""Display module for rendering calendar output.

- GridRenderer: month grid as a Rich table
- NoteRenderer: notes of a date
- console: shared Rich console instance
"""

from calnotes_cli.display.console import console
from calnotes_cli.display.grid_renderer import GridRenderer
from calnotes_cli.display.note_renderer import NoteRenderer

__all__ = [
    "console",
    "GridRenderer",
    "NoteRenderer",
]
