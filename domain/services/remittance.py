"""
Remittance Decoder

The bank sends remittance information as a run of fixed-width lines, each
LINE_WIDTH characters long: a 2-digit zero-padded line number followed by a
35-character payload padded with spaces.

    "01Invoice 4711                       02Thank you                          "

decodes to "Invoice 4711 Thank you". The end-to-end reference line and
everything after it is metadata and never part of the decoded text.
"""
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

from domain.exceptions import RemittanceEncodingError

PREFIX_WIDTH = 2
PAYLOAD_WIDTH = 35
LINE_WIDTH = PREFIX_WIDTH + PAYLOAD_WIDTH
END_TO_END_MARKER = "End-to-End-Ref"


@dataclass(frozen=True)
class RemittanceLine:
    number: int
    payload: str

    @property
    def text(self) -> str:
        return self.payload.rstrip(" ")

    @property
    def is_end_to_end_reference(self) -> bool:
        return END_TO_END_MARKER in self.payload


def iter_remittance_lines(raw: Optional[str]) -> Iterator[RemittanceLine]:
    """
    Yield the complete fixed-width lines of a raw remittance string, in order.

    A trailing fragment shorter than LINE_WIDTH is ignored.

    Raises:
        RemittanceEncodingError: When a line number prefix is not two ASCII digits.
            Lines before the broken one have already been yielded.
    """
    if not raw:
        return
    for number, start in enumerate(range(0, len(raw) - LINE_WIDTH + 1, LINE_WIDTH), start=1):
        chunk = raw[start:start + LINE_WIDTH]
        prefix = chunk[:PREFIX_WIDTH]
        if not (prefix.isascii() and prefix.isdigit()):
            raise RemittanceEncodingError(
                f"Remittance line {number} has invalid line number prefix {prefix!r}"
            )
        yield RemittanceLine(number=int(prefix), payload=chunk[PREFIX_WIDTH:])


class RemittanceDecoder:
    """
    Turns raw remittance information into readable text.

    Malformed input never aborts decoding: the text decoded up to the bad
    line is returned and `on_error` (if set) receives the error.
    """

    def __init__(self, on_error: Optional[Callable[[RemittanceEncodingError], None]] = None):
        self.on_error = on_error

    def decode(self, raw: Optional[str]) -> str:
        cleaned: list[str] = []
        try:
            for line in iter_remittance_lines(raw):
                if line.is_end_to_end_reference:
                    break
                if line.text:
                    cleaned.append(line.text)
        except RemittanceEncodingError as e:
            if self.on_error:
                self.on_error(e)
        return " ".join(cleaned)

    __call__ = decode


_default_decoder = RemittanceDecoder()


def decode_remittance(raw: Optional[str]) -> str:
    """Decode raw remittance information with the default (silent) decoder."""
    return _default_decoder.decode(raw)
