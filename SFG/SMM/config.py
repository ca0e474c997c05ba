# =============================================================================
# config.py — Run Configuration
# =============================================================================
#
# The configuration file uses the same lexical format as the definition
# files, one "key = value" per line:
#
#     # geometry
#     cells_per_frame    = 16K
#     ring_buffer_size   = 0x1_0000_0000
#     data_frames        = 32
#     filler_value       = 0
#     adc_per_nucleotide = 4
#     random_seed        = 1234
#
#     nucleotide_file    = nucleotides.def
#     fragment_file      = fragments.def
#     distribution_file  = distribution.def
#     output_file        = pattern.bin
#
# cells_per_frame and ring_buffer_size accept K / M / G suffixes.
# Relative file paths are taken relative to the configuration file.
# One value per line: a path can't contain spaces, commas or '='.
#
# REQUIRED: cells_per_frame, ring_buffer_size and the four file names.
# Everything else has a default (see SMM/constants.py).
# =============================================================================

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Iterable

from SFG.errors import ConfigError, DefinitionError
from SFG.SMM.constants import (
    BYTE_MASK,
    DEFAULT_ADC_PER_NUCLEOTIDE, DEFAULT_DATA_FRAMES,
    DEFAULT_FILLER_VALUE, DEFAULT_RANDOM_SEED,
)
from SFG.SDM.scanner import (
    TokenScanner, iter_definition_lines, parse_int, read_text_lines,
)


@dataclass(frozen=True)
class SensorConfig:
    """Read-only configuration record consumed by the generator."""

    cells_per_frame:    int = 0
    ring_buffer_size:   int = 0
    data_frames:        int = DEFAULT_DATA_FRAMES
    filler_value:       int = DEFAULT_FILLER_VALUE
    adc_per_nucleotide: int = DEFAULT_ADC_PER_NUCLEOTIDE
    random_seed:        int = DEFAULT_RANDOM_SEED
    nucleotide_file:    str = ""
    fragment_file:      str = ""
    distribution_file:  str = ""
    output_file:        str = ""

    def __post_init__(self) -> None:
        if not 0 <= self.filler_value <= BYTE_MASK:
            raise ConfigError(f"filler_value {self.filler_value} is not a byte")
        if self.adc_per_nucleotide < 1:
            raise ConfigError("adc_per_nucleotide must be at least 1")

    def resolve_paths(self, base_dir: str | os.PathLike) -> SensorConfig:
        """Return a copy with relative file paths anchored at base_dir."""
        changes = {}
        for key in _PATH_KEYS:
            value = getattr(self, key)
            if value and not os.path.isabs(value):
                changes[key] = os.path.join(base_dir, value)
        return replace(self, **changes)


_SCALED_KEYS   = ("cells_per_frame", "ring_buffer_size")
_PATH_KEYS     = ("nucleotide_file", "fragment_file", "distribution_file", "output_file")
_INT_KEYS      = tuple(f.name for f in fields(SensorConfig) if f.name not in _PATH_KEYS)
_REQUIRED_KEYS = _SCALED_KEYS + _PATH_KEYS


def parse_config(
    lines:    Iterable[str],
    source:   str = "<config>",
    required: Iterable[str] = (),
) -> SensorConfig:
    """
    Build a SensorConfig from configuration-file text.

    Every line must be exactly "key = value".  Keys listed in `required`
    must appear; the rest fall back to their defaults.
    """
    values: dict[str, int | str] = {}
    for number, line in iter_definition_lines(lines):
        scanner = TokenScanner(line)
        key   = scanner.next_token()
        value = scanner.next_token()
        if not key:
            raise ConfigError("Missing configuration key", source, number)
        if key not in _INT_KEYS and key not in _PATH_KEYS:
            raise ConfigError(f"Unknown configuration key '{key}'", source, number)
        if value is None:
            raise ConfigError(f"Missing value for '{key}'", source, number)
        if not scanner.at_end():
            raise ConfigError(
                f"Unexpected text after the value of '{key}': "
                f"{line[scanner.pos:].strip()!r}", source, number,
            )

        if key in _PATH_KEYS:
            values[key] = value
            continue
        try:
            values[key] = parse_int(value, scaled=key in _SCALED_KEYS)
        except DefinitionError as exc:
            raise ConfigError(exc.message, source, number) from None

    missing = [key for key in required if key not in values]
    if missing:
        raise ConfigError(f"Missing required key(s): {', '.join(missing)}", source)

    return SensorConfig(**values)


def load_config(path: str | os.PathLike) -> SensorConfig:
    """Read a configuration file; relative paths resolve against its folder."""
    config = parse_config(
        read_text_lines(path), source=os.fspath(path), required=_REQUIRED_KEYS,
    )
    return config.resolve_paths(os.path.dirname(os.path.abspath(path)))
