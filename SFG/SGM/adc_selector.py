# =============================================================================
# adc_selector.py — ADC Value Selector
# =============================================================================
#
# Turns a symbolic value into the byte actually written to a cell.
#
#   int literal          → literal & 0xFF          (deterministic)
#   nucleotide name "A"  → one of A's ADC levels    (uniform random)
#
# A nucleotide is sampled FRESH on every call.  Two cells painted from the
# same placeholder in the same frame get independent draws, and so do two
# frames.  Nothing is cached.
#
# RANDOMNESS:
#   One numpy Generator per run, seeded from config.random_seed.  Pass your
#   own `rng` to make draws reproducible (tests) or to share a stream.
# =============================================================================

from __future__ import annotations

import numpy as np

from SFG.errors import DefinitionError
from SFG.SMM.constants import BYTE_MASK, DEFAULT_RANDOM_SEED
from SFG.SDM.definitions import DefinitionStore
from SFG.SDM.resolver import SymbolicValue


class AdcSelector:
    """
    Samples ADC bytes for symbolic values.

    Usage:
        sel = AdcSelector(store, rng=np.random.default_rng(42))
        sel.to_adc(0x1FF)          # 0xFF
        sel.to_adc("A")            # one of store.levels("A"), as a byte
        sel.fill("A", 16)          # 16 independent draws, uint8 array
    """

    def __init__(
        self,
        store: DefinitionStore,
        rng:   np.random.Generator | None = None,
        seed:  int = DEFAULT_RANDOM_SEED,
    ) -> None:
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self._levels: dict[str, np.ndarray] = {
            name: np.asarray(levels, dtype=np.int64)
            for name, levels in store.nucleotides.items()
        }

    def _candidates(self, name: str) -> np.ndarray:
        levels = self._levels.get(name)
        if levels is None:
            raise DefinitionError(f"Unknown nucleotide '{name}'")
        if levels.size == 0:
            raise DefinitionError(f"Nucleotide '{name}' has no ADC levels")
        return levels

    def to_adc(self, value: SymbolicValue) -> int:
        """Return one concrete byte for `value`."""
        if isinstance(value, int):
            return value & BYTE_MASK
        levels = self._candidates(value)
        return int(levels[self.rng.integers(levels.size)]) & BYTE_MASK

    def fill(self, value: SymbolicValue, count: int) -> np.ndarray:
        """
        Return `count` bytes for `value` as a uint8 array.

        A literal repeats; a nucleotide is drawn independently per element.
        """
        if isinstance(value, int):
            return np.full(count, value & BYTE_MASK, dtype=np.uint8)
        levels = self._candidates(value)
        picks  = levels[self.rng.integers(levels.size, size=count)]
        return (picks & BYTE_MASK).astype(np.uint8)
