import csv
from typing import Sequence, TextIO


class CsvWriter:
    """RFC 4180 style CSV: header row first, then one line per display row."""

    def write(self, stream: TextIO, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
        writer = csv.writer(stream, lineterminator="\n")
        writer.writerow(headers)
        writer.writerows(rows)
