# =============================================================================
# scanner.py — Definition-Text Token Scanner
# =============================================================================
#
# All three definition files (and the configuration file) share one lexical
# format.  A line is a run of tokens; each token ends at a space, tab, comma,
# equals sign or line ending.  After a token, trailing whitespace is skipped
# and ONE ',' or '=' is consumed, so all of these scan the same way:
#
#     A 10,20          A = 10, 20          A   10 , 20
#
# "No token" (cursor at end of line) is None.  An empty token ("") is
# a real token: it is what sits between two adjacent commas.
#
# Trailing '\r' bytes (CRLF files read in binary or with newline='') are
# treated as end of line and never leak into the last token.
# =============================================================================

from __future__ import annotations

import os
from typing import Iterable, Iterator

from SFG.errors import DefinitionError, FileError
from SFG.SMM.constants import (
    WHITESPACE, SEPARATORS, LINE_ENDINGS, COMMENT_MARKERS, SIZE_SUFFIXES,
)

_TOKEN_STOP = WHITESPACE + SEPARATORS + LINE_ENDINGS


class TokenScanner:
    """
    Cursor over one line of definition text.

    Usage:
        sc = TokenScanner("F = AA, 0x10")
        sc.next_token()   # "F"
        sc.next_token()   # "AA"
        sc.next_token()   # "0x10"
        sc.next_token()   # None
    """

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos  = pos

    def _skip_whitespace(self) -> None:
        text = self.text
        while self.pos < len(text) and text[self.pos] in WHITESPACE:
            self.pos += 1

    def at_end(self) -> bool:
        """True when only whitespace (or a line ending) remains."""
        self._skip_whitespace()
        return self.pos >= len(self.text) or self.text[self.pos] in LINE_ENDINGS

    def next_token(self) -> str | None:
        """Extract the next token, or None if the line is exhausted."""
        if self.at_end():
            return None

        text  = self.text
        start = self.pos
        while self.pos < len(text) and text[self.pos] not in _TOKEN_STOP:
            self.pos += 1
        token = text[start:self.pos]

        self._skip_whitespace()
        if self.pos < len(text) and text[self.pos] in SEPARATORS:
            self.pos += 1

        return token

    def next_int(self, scaled: bool = True, source: str | None = None,
                 line: int | None = None) -> int | None:
        """Like next_token(), but converts the token with parse_int()."""
        token = self.next_token()
        if token is None:
            return None
        return parse_int(token, scaled=scaled, source=source, line=line)

    def remaining_tokens(self) -> list[str]:
        """Drain the scanner."""
        tokens = []
        while True:
            token = self.next_token()
            if token is None:
                return tokens
            tokens.append(token)


def parse_int(token: str, scaled: bool = False, source: str | None = None,
              line: int | None = None) -> int:
    """
    Convert a definition-text integer to an int.

    Parameters
    ----------
    token  : str   — "42", "0x2A", "1_000", "0x4000_0000", "64K" ...
    scaled : bool  — accept a trailing K / M / G byte-scale suffix
    source, line   — error context

    Returns
    -------
    int  — always >= 0.  An empty token converts to 0.

    Raises
    ------
    DefinitionError on an unknown suffix, bad digits or a negative value.
    """
    digits = token.replace("_", "").strip(WHITESPACE + LINE_ENDINGS)
    if not digits:
        return 0

    multiplier = 1
    suffix = digits[-1]
    if scaled and suffix in SIZE_SUFFIXES:
        multiplier = SIZE_SUFFIXES[suffix]
        digits = digits[:-1]
    elif not suffix.isdigit() and not _is_hex(digits):
        raise DefinitionError(f"Invalid suffix on '{token}'", source, line)

    try:
        if digits[:2] in ("0x", "0X"):
            value = int(digits[2:], 16)
        else:
            value = int(digits, 10)
    except ValueError:
        raise DefinitionError(f"Invalid integer '{token}'", source, line) from None

    if value < 0:
        raise DefinitionError(f"Negative value '{token}' not allowed", source, line)
    return value * multiplier


def _is_hex(digits: str) -> bool:
    return digits[:2] in ("0x", "0X") and digits[-1] in "0123456789abcdefABCDEF"


# ── Line iteration ───────────────────────────────────────────────────────────

def is_skippable(line: str) -> bool:
    """True for blank lines and full-line '#' or '//' comments."""
    body = line.lstrip(WHITESPACE)
    if not body or body[0] in LINE_ENDINGS:
        return True
    return body.startswith(COMMENT_MARKERS)


def iter_definition_lines(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield (1-based line number, line) for every line that carries data."""
    for number, line in enumerate(lines, start=1):
        if is_skippable(line):
            continue
        yield number, line


def read_text_lines(path: str | os.PathLike) -> list[str]:
    """
    Read a whole definition file as UTF-8 lines.

    Only '\\n' ends a line; a '\\r' before it is dropped.  Form feeds and
    other Unicode line breaks stay inside the line, so line numbers in
    error messages match what an editor shows.

    Raises FileError if the file is missing or is not valid UTF-8.
    """
    filename = os.fspath(path)
    try:
        with open(filename, "rb") as f:
            data = f.read()
    except OSError as exc:
        raise FileError(f"{filename} not found ({exc.strerror})") from exc

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        line = data.count(b"\n", 0, exc.start) + 1
        raise FileError(
            f"Invalid UTF-8 at byte offset {exc.start}", filename, line
        ) from exc

    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    return lines
