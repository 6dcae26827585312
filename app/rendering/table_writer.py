"""
Table writer built on rich.

Renders display rows as a bordered grid with a header row and a caption;
every column is left-aligned except the amount column.
"""
from typing import Sequence, TextIO

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

# Wide enough that rich never wraps or squeezes a column
CONSOLE_WIDTH = 1000


class TableWriter:
    def __init__(self, box_style: box.Box = box.ASCII):
        self.box_style = box_style

    def write(
        self,
        stream: TextIO,
        headers: Sequence[str],
        rows: Sequence[Sequence[str]],
        value_column: int,
        caption: str,
    ) -> None:
        table = Table(box=self.box_style, caption=caption, show_edge=True)
        for i, header in enumerate(headers):
            table.add_column(header, justify="right" if i == value_column else "left", no_wrap=True)
        for row in rows:
            # Text() keeps bank supplied brackets and colons away from rich markup and emoji codes
            table.add_row(*(Text(cell) for cell in row))

        console = Console(
            file=stream,
            width=CONSOLE_WIDTH,
            color_system=None,
            force_terminal=False,
            highlight=False,
            markup=False,
            emoji=False,
        )
        console.print(table)
