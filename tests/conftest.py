"""
Shared fixtures for the frame generator tests.

Definition files are written to pytest's tmp_path so every test gets its own
nucleotide / fragment / distribution / config set.  Random draws use a
seeded numpy Generator; only literal-valued cells are compared exactly.
"""
import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from SFG.SMM.config import SensorConfig
from SFG.SMM.constants import ROW_SIZE
from SFG.SDM.definitions import parse_fragments, parse_nucleotides
from SFG.SDM.distribution import parse_distributions


NUCLEOTIDES = """\
# ADC levels per nucleotide
A  10, 20
C  0x40, 0x48
G  100
// T has duplicates on purpose
T  200, 200, 210
"""

FRAGMENTS = """\
ramp    1, 2, 3, 4
polyA   AAAA
mixed   5, (polyA), C
"""


@pytest.fixture
def config_factory():
    """Build a SensorConfig with one-row frames unless overridden."""
    def _make(**overrides):
        values = dict(
            cells_per_frame=ROW_SIZE,
            ring_buffer_size=ROW_SIZE * 64,
            data_frames=2,
            filler_value=0xEE,
            adc_per_nucleotide=1,
            random_seed=7,
        )
        values.update(overrides)
        return SensorConfig(**values)
    return _make


@pytest.fixture
def store():
    """Nucleotides A C G T plus fragments ramp, polyA, mixed."""
    nucs = parse_nucleotides(NUCLEOTIDES.splitlines())
    return parse_fragments(FRAGMENTS.splitlines(), nucs)


@pytest.fixture
def table_factory(store):
    """Parse distribution text against the shared store."""
    def _make(text, cells_per_frame=ROW_SIZE):
        return parse_distributions(text.splitlines(), store, cells_per_frame)
    return _make


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def definition_files(tmp_path):
    """
    Write a complete, runnable definition set plus config file.

    Returns the path of the config file.
    """
    (tmp_path / "nucleotides.def").write_text(NUCLEOTIDES)
    (tmp_path / "fragments.def").write_text(FRAGMENTS)
    (tmp_path / "distribution.def").write_text(
        "# cells   $ fragments\n"
        "1         $ ramp\n"
        "3,7,2     $ polyA, ramp\n"
    )
    config = tmp_path / "sensor_frame_gen.conf"
    config.write_text(
        "cells_per_frame    = 2K\n"
        "ring_buffer_size   = 64K\n"
        "data_frames        = 4\n"
        "filler_value       = 0x55\n"
        "adc_per_nucleotide = 1\n"
        "random_seed        = 99\n"
        "nucleotide_file    = nucleotides.def\n"
        "fragment_file      = fragments.def\n"
        "distribution_file  = distribution.def\n"
        "output_file        = pattern.bin\n"
    )
    return config
