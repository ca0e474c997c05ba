# =============================================================================
# frame_builder.py — Sensor Frame Synthesizer
# =============================================================================
#
# Builds one raw data frame (cells_per_frame bytes) per frame index from the
# distribution table.
#
# FRAME RECIPE for frame index n:
#   1. Reset: every cell = filler_value.
#   2. For each distribution record, IN TABLE ORDER:
#        if n < len(record.values):
#            paint record.values[n] onto cells first-1, first-1+step, ... last-1
#   3. Later records overwrite earlier ones on shared cells.
#
# A record whose value sequence is used up simply stops painting; its cells
# fall back to filler (or to whatever another record paints there).
#
# The frame buffer is reused between calls but the reset in step 1 is
# unconditional, so no frame ever sees data from the one before it.
#
# FRAME ORDER:
#   iter_frames() yields frames 0, 1, 2, ... frame_group_count*data_frames-1
#   and nothing else.  The writer consumes them in that order.
# =============================================================================

from __future__ import annotations

from typing import Iterator

import numpy as np

from SFG.errors import RangeError
from SFG.SMM.config import SensorConfig
from SFG.SDM.distribution import DistributionTable
from SFG.SGM.adc_selector import AdcSelector


class FrameSynthesizer:
    """
    Builds raw sensor frames from a distribution table.

    Example:
        synth  = FrameSynthesizer(table, config)
        frame0 = synth.build_frame(0)                 # bytes, cells_per_frame long
        for frame in synth.iter_frames(plan.frame_group_count):
            sink.write(frame)
    """

    def __init__(
        self,
        table:    DistributionTable,
        config:   SensorConfig,
        selector: AdcSelector | None = None,
    ) -> None:
        """
        Args:
            table:    distribution records plus the store they resolve against
            config:   frame geometry and filler value
            selector: ADC sampler; default draws from a generator seeded
                      with config.random_seed
        """
        if config.cells_per_frame <= 0:
            raise RangeError(f"cells_per_frame must be positive, got {config.cells_per_frame}")

        self.table    = table
        self.config   = config
        self.selector = selector if selector is not None else AdcSelector(
            table.store, seed=config.random_seed,
        )

        self._frame = np.empty(config.cells_per_frame, dtype=np.uint8)

    # ── Frame state ──────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Fill every cell of the frame buffer with filler_value."""
        self._frame.fill(self.config.filler_value)

    def get_frame_snapshot(self) -> np.ndarray:
        """Return a copy of the current frame buffer."""
        return self._frame.copy()

    # ── Frame builder ────────────────────────────────────────────────────────

    def build_frame(self, frame_index: int) -> bytes:
        """
        Build the frame for `frame_index` and return its raw bytes.

        Args:
            frame_index: 0-based frame number, selects values[frame_index]
                         from every record

        Returns:
            bytes — exactly cells_per_frame long.
        """
        if frame_index < 0:
            raise RangeError(f"Frame index must not be negative, got {frame_index}")

        self.reset()

        for record in self.table:
            if frame_index >= len(record.values):
                continue
            cells = record.cell_indices()
            self._frame[cells.start:cells.stop:cells.step] = self.selector.fill(
                record.values[frame_index], len(cells)
            )

        return self._frame.tobytes()

    def iter_frames(self, frame_group_count: int) -> Iterator[bytes]:
        """Yield every frame of `frame_group_count` groups, in frame order."""
        total = frame_group_count * self.config.data_frames
        for frame_index in range(total):
            yield self.build_frame(frame_index)


def synthesize_frame(
    table:       DistributionTable,
    config:      SensorConfig,
    frame_index: int,
    selector:    AdcSelector | None = None,
) -> bytes:
    """One-shot convenience wrapper around FrameSynthesizer.build_frame()."""
    return FrameSynthesizer(table, config, selector).build_frame(frame_index)
