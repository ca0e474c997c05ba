# =============================================================================
# definitions.py — Definition Store (nucleotides + fragments)
# =============================================================================
#
# Two name → value mappings, built once per run and read-only afterwards:
#
#   nucleotides : one-character name → tuple of candidate ADC levels
#   fragments   : any-length name    → flat tuple of symbolic values
#
# NUCLEOTIDE FILE            FRAGMENT FILE
#   A  10, 20                  polyA  AAAA
#   C  0x40, 0x48, 0x50        marker 10, (polyA)C, @blank.bin
#
# Rules:
#   - A nucleotide name is exactly one character.
#   - A fragment may never share a name with a nucleotide.
#   - Fragments resolve in file order.  A fragment can only use nucleotides
#     and fragments defined ABOVE it; forward references are an error.
#   - Redefining a name replaces the earlier definition.
#
# The loaders never mutate the store they are given.  load_fragments()
# returns a new store holding the old nucleotides/fragments plus the new ones.
# =============================================================================

from __future__ import annotations

import logging
import os
from types import MappingProxyType
from typing import Iterable, Mapping

from SFG.errors import DefinitionError
from SFG.SMM.constants import DEFAULT_ADC_PER_NUCLEOTIDE
from SFG.SDM.scanner import (
    TokenScanner, iter_definition_lines, parse_int, read_text_lines,
)
from SFG.SDM.resolver import SymbolicValue, resolve_token

logger = logging.getLogger("sfg.definitions")


class DefinitionStore:
    """Nucleotide and fragment definitions for one run."""

    def __init__(
        self,
        nucleotides: Mapping[str, Iterable[int]] | None = None,
        fragments:   Mapping[str, Iterable[SymbolicValue]] | None = None,
    ) -> None:
        self._nucleotides: dict[str, tuple[int, ...]] = {
            name: tuple(levels) for name, levels in (nucleotides or {}).items()
        }
        self._fragments: dict[str, tuple[SymbolicValue, ...]] = {
            name: tuple(values) for name, values in (fragments or {}).items()
        }

    # ── Read-only views ──────────────────────────────────────────────────────

    @property
    def nucleotides(self) -> Mapping[str, tuple[int, ...]]:
        return MappingProxyType(self._nucleotides)

    @property
    def fragments(self) -> Mapping[str, tuple[SymbolicValue, ...]]:
        return MappingProxyType(self._fragments)

    def is_nucleotide(self, name: str) -> bool:
        return name in self._nucleotides

    def is_fragment(self, name: str) -> bool:
        return name in self._fragments

    def levels(self, name: str) -> tuple[int, ...]:
        """Candidate ADC levels of a nucleotide."""
        try:
            return self._nucleotides[name]
        except KeyError:
            raise DefinitionError(f"Unknown nucleotide '{name}'") from None

    def fragment(self, name: str) -> tuple[SymbolicValue, ...]:
        """Expanded values of a fragment."""
        try:
            return self._fragments[name]
        except KeyError:
            raise DefinitionError(f"Undefined fragment name '{name}'") from None

    def copy(self) -> DefinitionStore:
        return DefinitionStore(self._nucleotides, self._fragments)

    def __repr__(self) -> str:
        return (
            f"DefinitionStore(nucleotides={len(self._nucleotides)}, "
            f"fragments={len(self._fragments)})"
        )


# ── Nucleotides ──────────────────────────────────────────────────────────────

def parse_nucleotides(lines: Iterable[str], source: str = "<nucleotides>") -> DefinitionStore:
    """Build a store holding the nucleotides defined in `lines`."""
    store = DefinitionStore()

    for number, line in iter_definition_lines(lines):
        scanner = TokenScanner(line)
        name = scanner.next_token()
        if not name:
            continue
        if len(name) != 1:
            raise DefinitionError(f"Illegal nucleotide: {name}", source, number)

        levels = []
        for token in scanner.remaining_tokens():
            if not token:
                raise DefinitionError(
                    f"Empty ADC level in nucleotide '{name}'", source, number
                )
            levels.append(parse_int(token, scaled=False, source=source, line=number))

        store._nucleotides[name] = tuple(levels)

    logger.info("Loaded %d nucleotide(s) from %s", len(store._nucleotides), source)
    return store


def load_nucleotides(path: str | os.PathLike) -> DefinitionStore:
    """Read the nucleotide definition file."""
    return parse_nucleotides(read_text_lines(path), source=os.fspath(path))


# ── Fragments ────────────────────────────────────────────────────────────────

def parse_fragments(
    lines:              Iterable[str],
    store:              DefinitionStore,
    adc_per_nucleotide: int = DEFAULT_ADC_PER_NUCLEOTIDE,
    source:             str = "<fragments>",
    base_dir:           str | os.PathLike | None = None,
) -> DefinitionStore:
    """
    Expand every fragment defined in `lines` on top of `store`.

    Parameters
    ----------
    lines              : fragment-file text, one definition per line
    store              : nucleotides (and any fragments) defined so far
    adc_per_nucleotide : placeholder multiplicity for bare nucleotides
    source             : file name used in error messages
    base_dir           : directory relative "@file" includes start from

    Returns
    -------
    DefinitionStore  — a new store; `store` itself is left untouched.
    """
    result = store.copy()

    for number, line in iter_definition_lines(lines):
        scanner = TokenScanner(line)
        name = scanner.next_token()
        if not name:
            continue
        if result.is_nucleotide(name):
            raise DefinitionError(
                f"Fragment '{name}' shares name with nucleotide", source, number
            )

        values: list[SymbolicValue] = []
        for token in scanner.remaining_tokens():
            values.extend(resolve_token(
                token, result, adc_per_nucleotide,
                base_dir=base_dir, source=source, line=number,
            ))

        result._fragments[name] = tuple(values)
        logger.debug("Fragment %s: %d value(s)", name, len(values))

    logger.info("Loaded %d fragment(s) from %s", len(result._fragments), source)
    return result


def load_fragments(
    path:               str | os.PathLike,
    store:              DefinitionStore,
    adc_per_nucleotide: int = DEFAULT_ADC_PER_NUCLEOTIDE,
) -> DefinitionStore:
    """Read the fragment definition file; "@file" paths are relative to it."""
    return parse_fragments(
        read_text_lines(path), store, adc_per_nucleotide,
        source=os.fspath(path),
        base_dir=os.path.dirname(os.path.abspath(path)),
    )
