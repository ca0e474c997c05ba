# =============================================================================
# capacity.py — Capacity Planner
# =============================================================================
#
# Decides how many frames the output file holds and refuses to run when they
# would not fit the destination ring buffer.
#
#   frame_group_count = longest_sequence // data_frames + 1
#   total_frames      = frame_group_count * data_frames
#   max_frames        = ring_buffer_size  // cells_per_frame
#
# NOTE: the "+ 1" always adds a whole extra frame group, even when the
#       longest sequence is an exact multiple of data_frames.  Do NOT
#       "fix" it.  A longest sequence of 0 still yields one group.
#
# Failure is fatal: a distribution that does not fit is never truncated.
# =============================================================================

from __future__ import annotations

import logging
from typing import NamedTuple

from SFG.errors import CapacityError, RangeError
from SFG.SMM.config import SensorConfig
from SFG.SMM.constants import ROW_SIZE
from SFG.SDM.distribution import DistributionTable

logger = logging.getLogger("sfg.capacity")


class CapacityPlan(NamedTuple):
    longest_sequence:  int     # frames in the longest fragment sequence
    frames_per_group:  int     # config.data_frames
    frame_group_count: int     # groups written to the output file
    max_frames:        int     # frames that fit the ring buffer
    total_frames:      int     # frame_group_count * frames_per_group
    total_bytes:       int     # total_frames * cells_per_frame

    @property
    def fits(self) -> bool:
        return self.total_frames <= self.max_frames

    def report_lines(self) -> list[str]:
        """Statistics block printed before a run."""
        return [
            f"{self.longest_sequence:>16,} Frames in the longest fragment sequence",
            f"{self.frames_per_group:>16,} Frames in a frame group",
            f"{self.frame_group_count:>16,} Frame group(s) required",
            f"{self.max_frames:>16,} Frames will fit into the contiguous buffer",
            f"{self.total_frames:>16,} Frames required in total",
            f"{self.total_bytes:>16,} Bytes required in total",
        ]


def check_frame_geometry(config: SensorConfig) -> None:
    """Reject frame sizes the chip can't hold.  Raises RangeError."""
    if config.cells_per_frame <= 0 or config.cells_per_frame % ROW_SIZE != 0:
        raise RangeError(
            f"Config value 'cells_per_frame' ({config.cells_per_frame}) "
            f"must be a positive multiple of {ROW_SIZE}"
        )
    if config.data_frames < 1:
        raise RangeError(
            f"Config value 'data_frames' ({config.data_frames}) must be at least 1"
        )


def compute_plan(longest_sequence: int, config: SensorConfig) -> CapacityPlan:
    """Frame and byte accounting, without the capacity verdict."""
    check_frame_geometry(config)

    frame_group_count = longest_sequence // config.data_frames + 1
    total_frames      = frame_group_count * config.data_frames

    return CapacityPlan(
        longest_sequence  = longest_sequence,
        frames_per_group  = config.data_frames,
        frame_group_count = frame_group_count,
        max_frames        = config.ring_buffer_size // config.cells_per_frame,
        total_frames      = total_frames,
        total_bytes       = total_frames * config.cells_per_frame,
    )


def plan_capacity(table: DistributionTable, config: SensorConfig) -> CapacityPlan:
    """
    Plan the output file for `table` and verify it fits the ring buffer.

    Returns
    -------
    CapacityPlan  — plan.frame_group_count is what the writer needs.

    Raises
    ------
    RangeError     cells_per_frame not a positive multiple of ROW_SIZE,
                   or data_frames < 1
    CapacityError  total_frames > max_frames  (exc.plan holds the numbers)
    """
    plan = compute_plan(table.longest_sequence, config)

    logger.info(
        "Capacity: %d group(s) x %d frame(s), %d of %d frames, %d bytes",
        plan.frame_group_count, plan.frames_per_group,
        plan.total_frames, plan.max_frames, plan.total_bytes,
    )

    if not plan.fits:
        raise CapacityError(
            "The specified fragment distribution won't fit into the contiguous buffer "
            f"({plan.total_frames:,} frames required, {plan.max_frames:,} available)",
            plan=plan,
        )
    return plan
