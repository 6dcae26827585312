"""Shared builders for tests."""
import json
import os


def encode_remittance(*lines: str) -> str:
    """Build fixed-width remittance info: 2-digit line number + 35-char payload per line."""
    return "".join(f"{i:02d}{text:<35}" for i, text in enumerate(lines, start=1))


def load_payload(filename: str) -> dict:
    """Load a saved bank API payload from tests/data."""
    base_path = os.path.dirname(__file__)
    with open(os.path.join(base_path, "data", filename), "r") as f:
        return json.load(f)
