# =============================================================================
# output_writer.py — Raw Frame File Writer
# =============================================================================
#
# Output format: frames back to back, cells_per_frame bytes each.
# No header, no metadata, no delimiters.
#
#   file size = frame_group_count * data_frames * cells_per_frame
#
# If anything fails part-way, the partial file is removed: a short output
# file is never a valid result.
# =============================================================================

from __future__ import annotations

import logging
import os
from typing import BinaryIO, Iterable

from SFG.errors import FileError
from SFG.SGM.capacity import CapacityPlan
from SFG.SGM.frame_builder import FrameSynthesizer

logger = logging.getLogger("sfg.output")


def write_frames(sink: BinaryIO, frames: Iterable[bytes]) -> int:
    """Write frames to an open binary sink; return the byte count."""
    written = 0
    for frame in frames:
        sink.write(frame)
        written += len(frame)
    return written


def write_output_file(
    path:        str | os.PathLike,
    synthesizer: FrameSynthesizer,
    plan:        CapacityPlan,
) -> int:
    """
    Synthesize every planned frame into `path`.

    Returns
    -------
    int  — bytes written (== plan.total_bytes)

    Raises
    ------
    FileError  if the file can't be created or written.  Errors raised while
               synthesizing propagate unchanged; either way the partial file
               is deleted.
    """
    filename = os.fspath(path)
    try:
        sink = open(filename, "wb")
    except OSError as exc:
        raise FileError(f"Can't create {filename} ({exc.strerror})") from exc

    try:
        with sink:
            written = write_frames(sink, synthesizer.iter_frames(plan.frame_group_count))
    except OSError as exc:
        _discard(filename)
        raise FileError(f"Can't write {filename} ({exc.strerror})") from exc
    except BaseException:
        _discard(filename)
        raise

    logger.info("Wrote %d frame(s), %d bytes to %s", plan.total_frames, written, filename)
    return written


def _discard(filename: str) -> None:
    try:
        os.remove(filename)
    except OSError:
        logger.warning("Could not remove partial output %s", filename)
