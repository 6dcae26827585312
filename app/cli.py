"""
Account transaction history CLI

Fetches the transactions of a bank account and prints them as a table, CSV
or JSON.

Usage:
    transactions ACCOUNT_ID --since 2021-01-01
    transactions ACCOUNT_ID --since 2021-01-01 --format csv > transactions.csv
    transactions ACCOUNT_ID --count 50 --index 100 --format json

Environment (or .env):
    BANK_API_URL, BANK_ACCESS_TOKEN, TXN_PAGE_SIZE, TXN_PAGE_TIMEOUT, LOG_LEVEL
"""
import argparse
import asyncio
import sys
from datetime import date, datetime
from typing import Optional, TextIO

from dotenv import load_dotenv

from app.rendering import OutputFormat, Renderer
from application.service.fetch_transactions import FetchTransactionsService
from domain.config import get_bank_config, get_fetch_config, reload_config
from domain.entities import FetchResult
from domain.entities.transaction import DATE_FORMAT
from domain.exceptions import BankAPIError, DateParseError
from domain.services import SCHEMAS
from infrastructure.clients import BankClient, TransactionRepoAPI
from infrastructure.logging.logging_adapter import LoggingAdapter
from infrastructure.logging.structlog_logs import configure_logging
from infrastructure.metrics.metrics import write_metrics_textfile
from infrastructure.metrics.metrics_adapter import MetricsAdapter


def _parse_since(value: str) -> date:
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD")


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="transactions",
        description="List the transactions of a bank account",
    )
    parser.add_argument("account_id", help="Bank account identifier")
    parser.add_argument(
        "--since",
        type=_parse_since,
        default=None,
        help="Only show transactions booked on or after this date (YYYY-MM-DD)",
    )
    parser.add_argument(
        "--format", "-f",
        dest="output_format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.TABLE.value,
        help="Output format (default: table)",
    )
    parser.add_argument(
        "--count", "-c",
        type=_positive_int,
        default=None,
        help="Transactions per page request (default: TXN_PAGE_SIZE)",
    )
    parser.add_argument(
        "--index", "-i",
        type=_non_negative_int,
        default=0,
        help="First index of the page when --since is not given",
    )
    parser.add_argument(
        "--schema",
        choices=sorted(SCHEMAS),
        default="description",
        help="Columns for table and CSV output (default: description)",
    )
    parser.add_argument(
        "--metrics-file",
        default=None,
        help="Write Prometheus metrics to this file (node-exporter textfile format)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log at INFO level on stderr",
    )
    return parser


async def fetch(
    account_id: str,
    since: Optional[date],
    page_size: int,
    page_index: int,
    logging_port: LoggingAdapter,
    metrics_port: MetricsAdapter,
) -> FetchResult:
    bank_config = get_bank_config()
    async with BankClient(
        base_url=bank_config.base_url,
        connect_timeout=bank_config.connect_timeout,
        read_timeout=bank_config.read_timeout,
        access_token=bank_config.access_token or None,
    ) as bank_client:
        srv = FetchTransactionsService(
            transaction_repo=TransactionRepoAPI(bank_client),
            metrics_port=metrics_port,
            logging_port=logging_port,
            page_timeout=get_fetch_config().page_timeout,
        )
        return await srv.execute(account_id, since, page_size, page_index)


def main(argv: Optional[list[str]] = None, stdout: Optional[TextIO] = None) -> int:
    load_dotenv()
    reload_config()

    args = build_parser().parse_args(argv)
    configure_logging("INFO" if args.verbose else None)
    stdout = stdout or sys.stdout

    logging_port = LoggingAdapter()
    metrics_port = MetricsAdapter()
    page_size = args.count or get_fetch_config().page_size

    try:
        result = asyncio.run(
            fetch(args.account_id, args.since, page_size, args.index, logging_port, metrics_port)
        )
        Renderer(metrics_port=metrics_port, logging_port=logging_port).render(
            result, args.output_format, stdout, schema=SCHEMAS[args.schema]
        )
    except BankAPIError as e:
        print(f"Error retrieving transactions: {e}", file=sys.stderr)
        return 1
    except DateParseError as e:
        print(f"Error filtering transactions by date: {e}", file=sys.stderr)
        return 1
    finally:
        if args.metrics_file:
            write_metrics_textfile(args.metrics_file)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
