#!/usr/bin/env python3
"""
Offline transaction renderer

Replays a saved bank API payload ({"paging": ..., "values": [...]}) through the
same fetch, filter and render pipeline as the CLI, without touching the network.
Handy for checking how a statement renders before pointing the CLI at the bank.

Usage:
    python scripts/render_transactions_file.py tests/data/transactions_account.json
    python scripts/render_transactions_file.py tests/data/transactions_account.json --since 2021-01-01 --format csv
"""
import argparse
import asyncio
import json
import os
import sys
from datetime import datetime

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from app.rendering import OutputFormat, Renderer
from application.service.fetch_transactions import FetchTransactionsService
from domain.entities import PagingOptions
from domain.services import SCHEMAS
from infrastructure.clients.transaction_repo_api import TransactionRepoAPI


class FilePayloadClient:
    """Serves slices of a saved payload the way the bank API serves pages."""

    def __init__(self, payload: dict):
        self.payload = payload

    async def fetch_transactions(self, account_id: str, paging: PagingOptions) -> dict:
        values = self.payload.get("values", [])
        return {
            "paging": {"index": paging.first, "matches": len(values)},
            "values": values[paging.first:paging.first + paging.count],
        }


def load_payload(file_path: str) -> dict:
    """Load a saved transactions payload from a JSON file."""
    with open(file_path, "r") as f:
        return json.load(f)


def main():
    parser = argparse.ArgumentParser(description="Render a saved transactions payload")
    parser.add_argument("file_path", help="Path to transactions JSON file")
    parser.add_argument("--since", default=None, help="Cutoff date (YYYY-MM-DD)")
    parser.add_argument("--format", dest="output_format", default="table", choices=[f.value for f in OutputFormat])
    parser.add_argument("--count", type=int, default=20, help="Page size hint")
    parser.add_argument("--schema", default="description", choices=sorted(SCHEMAS))
    args = parser.parse_args()

    try:
        payload = load_payload(args.file_path)
    except FileNotFoundError:
        print(f"Error: File not found: {args.file_path}", file=sys.stderr)
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.file_path}: {e}", file=sys.stderr)
        sys.exit(1)

    since = datetime.strptime(args.since, "%Y-%m-%d").date() if args.since else None
    srv = FetchTransactionsService(TransactionRepoAPI(FilePayloadClient(payload)))
    result = asyncio.run(srv.execute("offline", since, args.count))
    Renderer().render(result, args.output_format, sys.stdout, schema=SCHEMAS[args.schema])


if __name__ == "__main__":
    main()
