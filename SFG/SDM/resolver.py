# =============================================================================
# resolver.py — Symbol Resolver
# =============================================================================
#
# Expands ONE fragment-file token into a flat tuple of symbolic values.
#
# A symbolic value is either
#   int  — a literal ADC value, written to the cell as is (low byte), or
#   str  — a one-character nucleotide name, sampled at synthesis time.
#
# RESOLUTION RULES (first match wins):
#   1. "42", "0x2A"   leading decimal digit → one integer literal
#   2. "@blob.bin"    binary include         → one literal per file byte
#   3. anything else  symbol expression, read one character at a time:
#        "(name)"  → the multi-character name between the parentheses
#        "c"       → the single-character name c
#      then each name is looked up:
#        nucleotide → its name, repeated adc_per_nucleotide times
#        fragment   → its already-expanded values, inlined
#        otherwise  → DefinitionError
#
# Fragments are expanded when they are DEFINED, so a fragment reference is
# always one level deep here: there is nothing left to recurse into.
# =============================================================================

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Union

from SFG.errors import DefinitionError, FileError
from SFG.SMM.constants import FILE_INCLUDE_PREFIX, GROUP_OPEN, GROUP_CLOSE
from SFG.SDM.scanner import parse_int

if TYPE_CHECKING:
    from SFG.SDM.definitions import DefinitionStore

logger = logging.getLogger("sfg.resolver")

SymbolicValue = Union[int, str]

_DECIMAL_DIGITS = "0123456789"


def resolve_token(
    token:              str,
    store:              DefinitionStore,
    adc_per_nucleotide: int = 1,
    base_dir:           str | os.PathLike | None = None,
    source:             str | None = None,
    line:               int | None = None,
) -> tuple[SymbolicValue, ...]:
    """
    Expand one token into symbolic values.

    Args:
        token:              raw token from the fragment file
        store:              nucleotides + fragments defined so far
        adc_per_nucleotide: how many placeholders one bare nucleotide yields
        base_dir:           directory that relative "@file" paths start from
        source, line:       error context

    Returns:
        Tuple of int literals and nucleotide-name placeholders, in order.
    """
    if not token:
        return ()

    # Rule 1 — integer literal
    if token[0] in _DECIMAL_DIGITS:
        return (parse_int(token, scaled=False, source=source, line=line),)

    # Rule 2 — binary include
    if token.startswith(FILE_INCLUDE_PREFIX):
        path = token[len(FILE_INCLUDE_PREFIX):]
        if base_dir is not None and not os.path.isabs(path):
            path = os.path.join(base_dir, path)
        return read_binary_values(path, source=source, line=line)

    # Rule 3 — symbol expression
    values: list[SymbolicValue] = []
    for name in split_symbol_names(token, source=source, line=line):
        if store.is_nucleotide(name):
            values.extend([name] * adc_per_nucleotide)
        elif store.is_fragment(name):
            values.extend(store.fragment(name))
        else:
            raise DefinitionError(f"Unknown fragment/nucleotide '{name}'", source, line)
    return tuple(values)


def split_symbol_names(token: str, source: str | None = None,
                       line: int | None = None) -> list[str]:
    """
    Break a symbol expression into names.

    "AC(polyA)G" -> ["A", "C", "polyA", "G"]
    """
    names: list[str] = []
    pos = 0
    while pos < len(token):
        c = token[pos]
        pos += 1
        if c != GROUP_OPEN:
            names.append(c)
            continue
        close = token.find(GROUP_CLOSE, pos)
        if close < 0:
            raise DefinitionError(
                f"Unbalanced parenthesis in '{token}'", source, line
            )
        names.append(token[pos:close])
        pos = close + 1
    return names


def read_binary_values(path: str | os.PathLike, source: str | None = None,
                       line: int | None = None) -> tuple[int, ...]:
    """Read a whole binary file; every byte becomes one literal value."""
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as exc:
        raise FileError(
            f"Can't open fragment file '{os.fspath(path)}' ({exc.strerror})",
            source, line,
        ) from exc

    logger.debug("Included %d bytes from %s", len(data), os.fspath(path))
    return tuple(data)
