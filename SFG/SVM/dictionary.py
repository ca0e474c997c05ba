# =============================================================================
# dictionary.py — Data Dictionary Report
# =============================================================================
#
# Lists every fragment with its expanded length (in frames), then every
# distribution record with the length of its value sequence.
#
#                  Fragment Name    Size
#   ------------------------------------------
#                          polyA       4
#                         marker      12
#
#
#              Distribution Name    Size
#   ------------------------------------------
#                     1,2048,2      16
# =============================================================================

from __future__ import annotations

from SFG.SDM.definitions import DefinitionStore
from SFG.SDM.distribution import DistributionTable

_RULE = "-" * 42


def dictionary_lines(store: DefinitionStore, table: DistributionTable) -> list[str]:
    """Render the data dictionary as printable lines."""
    lines = ["", f"{'Fragment Name':>30}    Size", _RULE]
    for name in sorted(store.fragments):
        lines.append(f"{name:>30} {len(store.fragments[name]):7d}")

    lines += ["", "", f"{'Distribution Name':>30}    Size", _RULE]
    for record in table:
        lines.append(f"{record.label():>30} {len(record.values):7d}")

    return lines
