"""
Renderer

Writes a fetched transaction set to an output stream as a table, markdown
table, CSV or JSON. Table and CSV only show BOOKED transactions (through the
row projector); JSON carries every fetched transaction.
"""
from enum import Enum
from typing import Optional, TextIO

from rich import box

from domain.entities import FetchResult
from domain.exceptions import RemittanceEncodingError
from domain.interfaces import LoggingPort, MetricsPort
from domain.services import DESCRIPTION_SCHEMA, ColumnSchema, RemittanceDecoder, project_rows
from app.rendering.csv_writer import CsvWriter
from app.rendering.json_writer import JsonWriter
from app.rendering.table_writer import TableWriter


class OutputFormat(str, Enum):
    TABLE = "table"
    MARKDOWN = "markdown"
    CSV = "csv"
    JSON = "json"


class Renderer:
    def __init__(
        self,
        metrics_port: Optional[MetricsPort] = None,
        logging_port: Optional[LoggingPort] = None,
    ):
        self.metrics_port = metrics_port
        self.logging_port = logging_port

    def render(
        self,
        result: FetchResult,
        output_format: OutputFormat | str,
        stream: TextIO,
        schema: ColumnSchema = DESCRIPTION_SCHEMA,
    ) -> int:
        """
        Render `result` to `stream`.

        Args:
            result: Fetched (and date filtered) transactions
            output_format: table, markdown, csv or json
            stream: Text stream to write to; flushed before returning
            schema: Column schema for table and CSV output

        Returns:
            Number of transactions written

        Raises:
            ValueError: If the output format is unknown
            OSError: If writing to the stream fails
        """
        output_format = OutputFormat(output_format)
        try:
            if output_format is OutputFormat.JSON:
                JsonWriter().write(stream, result)
                return len(result.page)

            truncate = output_format in (OutputFormat.TABLE, OutputFormat.MARKDOWN)
            rows = project_rows(result.page.values, schema, truncate=truncate, decode=self._decoder())
            if output_format is OutputFormat.CSV:
                CsvWriter().write(stream, schema.headers, rows)
            else:
                box_style = box.MARKDOWN if output_format is OutputFormat.MARKDOWN else box.ASCII
                TableWriter(box_style).write(
                    stream,
                    schema.headers,
                    rows,
                    value_column=schema.value_column,
                    caption=f"{len(rows)} out of {result.matches}",
                )
            return len(rows)
        finally:
            stream.flush()

    def _decoder(self) -> RemittanceDecoder:
        log = self.logging_port.bind(step="render") if self.logging_port else None

        def on_error(error: RemittanceEncodingError) -> None:
            if self.metrics_port:
                self.metrics_port.increment_remittance_decode_errors()
            if log:
                log.warning("remittance_decode_failed", error=str(error))

        return RemittanceDecoder(on_error=on_error)
