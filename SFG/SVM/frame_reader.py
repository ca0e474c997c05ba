#!/usr/bin/env python3
# =============================================================================
# frame_reader.py — Output-File Frame Reader and Cell Trace
# =============================================================================
#
# Reads a generated pattern file back as frames, the same way the chip's
# loader sees it: a flat run of cells_per_frame-byte frames.
#
#   read_frames(path, cells)          → (n_frames, cells) uint8 array
#   trace_cell(path, cells, index)    → value of one cell in every frame
#
# A trailing partial frame (file size not a multiple of cells_per_frame) is
# ignored, as the chip loader would never DMA it.
#
# Usage:
#   python -m SFG.SVM.frame_reader <output_file> <cells_per_frame> <cell>
# =============================================================================

from __future__ import annotations

import argparse
import os
import sys

import numpy as np

from SFG.errors import FileError, RangeError


def read_frames(path: str | os.PathLike, cells_per_frame: int) -> np.ndarray:
    """
    Map a pattern file as a read-only 2-D array of frames.

    Returns
    -------
    np.ndarray  shape (n_frames, cells_per_frame), dtype uint8
    """
    if cells_per_frame <= 0:
        raise RangeError(f"cells_per_frame must be positive, got {cells_per_frame}")

    filename = os.fspath(path)
    try:
        size = os.path.getsize(filename)
    except OSError as exc:
        raise FileError(f"Can't open {filename} ({exc.strerror})") from exc

    n_frames = size // cells_per_frame
    if n_frames == 0:
        return np.empty((0, cells_per_frame), dtype=np.uint8)

    return np.memmap(
        filename, dtype=np.uint8, mode="r", shape=(n_frames, cells_per_frame),
    )


def trace_cell(path: str | os.PathLike, cells_per_frame: int, cell_index: int) -> list[int]:
    """
    Return the value of one cell for every frame in the file.

    Args:
        cell_index: 0-based byte offset inside the frame
    """
    if not 0 <= cell_index < cells_per_frame:
        raise RangeError(
            f"Cell {cell_index} is outside the frame (0..{cells_per_frame - 1})"
        )
    frames = read_frames(path, cells_per_frame)
    return frames[:, cell_index].tolist()


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------
def main() -> None:
    parser = argparse.ArgumentParser(description="Trace one cell through a pattern file")
    parser.add_argument("output_file", help="Generated pattern file")
    parser.add_argument("cells_per_frame", type=int, help="Frame size in cells")
    parser.add_argument("cell", type=int, help="0-based cell index to trace")
    args = parser.parse_args()

    try:
        values = trace_cell(args.output_file, args.cells_per_frame, args.cell)
    except (FileError, RangeError) as exc:
        print(f"  [!!] {exc}", file=sys.stderr)
        sys.exit(1)

    for value in values:
        print(value)


if __name__ == "__main__":
    main()
