from .remittance import RemittanceDecoder, decode_remittance
from .date_filter import DateFilter
from .projection import ColumnSchema, DESCRIPTION_SCHEMA, SPLIT_SCHEMA, SCHEMAS, project, project_rows

__all__ = [
    "RemittanceDecoder",
    "decode_remittance",
    "DateFilter",
    "ColumnSchema",
    "DESCRIPTION_SCHEMA",
    "SPLIT_SCHEMA",
    "SCHEMAS",
    "project",
    "project_rows",
]
