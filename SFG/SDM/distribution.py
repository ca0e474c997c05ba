# =============================================================================
# distribution.py — Distribution Table
# =============================================================================
#
# A distribution record paints a per-frame sequence of symbolic values onto
# a strided range of cells:
#
#     first[,last[,step]] $ fragment[,fragment...]
#
#     1,2048,2  $ polyA, marker    every odd cell of row 1 gets
#                                  polyA+marker, one value per frame
#
# Cell numbers are 1-BASED and INCLUSIVE (cell 1 = byte 0 of the frame).
#   last omitted or 0 → last = first   (single cell)
#   step omitted or 0 → step = 1
#
# Records keep file order.  When two records cover the same cell in the
# same frame, the LATER record wins (it is painted last).
# =============================================================================

from __future__ import annotations

import logging
import os
from typing import Iterable, Iterator, NamedTuple

from SFG.errors import DefinitionError, RangeError
from SFG.SMM.constants import DISTRIBUTION_DELIMITER, WHITESPACE
from SFG.SDM.definitions import DefinitionStore
from SFG.SDM.resolver import SymbolicValue
from SFG.SDM.scanner import TokenScanner, iter_definition_lines, read_text_lines

logger = logging.getLogger("sfg.distribution")


class DistributionRecord(NamedTuple):
    first:  int                            # 1-based first cell
    last:   int                            # 1-based last cell (inclusive)
    step:   int                            # stride between painted cells
    values: tuple[SymbolicValue, ...]      # values[frame_index]

    def cell_indices(self) -> range:
        """0-based frame offsets this record paints."""
        return range(self.first - 1, self.last, self.step)

    def label(self) -> str:
        return f"{self.first},{self.last},{self.step}"


class DistributionTable:
    """
    Ordered, read-only list of distribution records.

    `store` is the DefinitionStore the records were resolved against; the
    frame synthesizer samples nucleotide placeholders from it.
    """

    def __init__(self, records: Iterable[DistributionRecord] = (),
                 store: DefinitionStore | None = None) -> None:
        self._records: tuple[DistributionRecord, ...] = tuple(records)
        self.store = store if store is not None else DefinitionStore()

    @property
    def records(self) -> tuple[DistributionRecord, ...]:
        return self._records

    @property
    def longest_sequence(self) -> int:
        """Length of the longest value sequence, 0 for an empty table."""
        return max((len(r.values) for r in self._records), default=0)

    def __iter__(self) -> Iterator[DistributionRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index: int) -> DistributionRecord:
        return self._records[index]

    def __repr__(self) -> str:
        return f"DistributionTable(records={len(self._records)}, longest={self.longest_sequence})"


def parse_distributions(
    lines:           Iterable[str],
    store:           DefinitionStore,
    cells_per_frame: int,
    source:          str = "<distribution>",
) -> DistributionTable:
    """
    Build the distribution table from distribution-file text.

    Raises
    ------
    DefinitionError  missing '$', bad or negative integer, undefined
                     fragment name
    RangeError       cell range outside 1..cells_per_frame
    """
    records: list[DistributionRecord] = []

    for number, line in iter_definition_lines(lines):
        cells, sep, names = line.partition(DISTRIBUTION_DELIMITER)
        if not sep:
            raise DefinitionError(
                f"Missing '{DISTRIBUTION_DELIMITER}' in distribution definition",
                source, number,
            )

        # ── Cell range ───────────────────────────────────────────────────────
        scanner = TokenScanner(cells)
        first = scanner.next_int(source=source, line=number) or 0
        last  = scanner.next_int(source=source, line=number) or 0
        step  = scanner.next_int(source=source, line=number) or 0
        if not scanner.at_end():
            raise DefinitionError(
                f"Unexpected text before '{DISTRIBUTION_DELIMITER}': {cells.strip()!r}",
                source, number,
            )

        if first < 1 or first > cells_per_frame:
            raise RangeError(f"Invalid cell number {first}", source, number)
        if last == 0:
            last = first
        if step == 0:
            step = 1
        if last < first or last > cells_per_frame:
            raise RangeError(
                f"Invalid cell range {first}..{last} "
                f"(frame has {cells_per_frame} cells)", source, number,
            )

        # ── Fragment list ────────────────────────────────────────────────────
        names = names.lstrip(WHITESPACE)
        if names.startswith(","):
            names = names[1:]

        values: list[SymbolicValue] = []
        for name in TokenScanner(names).remaining_tokens():
            if not store.is_fragment(name):
                raise DefinitionError(f"Undefined fragment name '{name}'", source, number)
            values.extend(store.fragment(name))

        records.append(DistributionRecord(first, last, step, tuple(values)))

    table = DistributionTable(records, store)
    logger.info(
        "Loaded %d distribution record(s) from %s, longest sequence %d",
        len(table), source, table.longest_sequence,
    )
    return table


def load_distributions(
    path:            str | os.PathLike,
    store:           DefinitionStore,
    cells_per_frame: int,
) -> DistributionTable:
    """Read the distribution definition file."""
    return parse_distributions(
        read_text_lines(path), store, cells_per_frame, source=os.fspath(path),
    )
