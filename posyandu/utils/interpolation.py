import logging
import math

import numpy as np

from posyandu.core.errors import ValidationError
from posyandu.models.reference_table import Breakpoints, ReferenceTable

logger = logging.getLogger(__name__)

KEY_TOLERANCE = 0.001


def lookup(table: ReferenceTable, key: float) -> Breakpoints:
    """
    Breakpoints of ``table`` at ``key``.

    A tabulated key returns its row verbatim. Keys between two tabulated keys
    are linearly interpolated column by column; keys outside the table clamp
    to the first or last row.
    """
    if not math.isfinite(key):
        raise ValidationError("key", f"lookup key for {table.name} must be finite")

    keys = table.keys
    exact = np.flatnonzero(np.abs(keys - key) < KEY_TOLERANCE)
    if exact.size:
        return table.row(int(exact[0]))

    if key <= keys[0]:
        return table.row(0)
    if key >= keys[-1]:
        return table.row(len(keys) - 1)

    upper = int(np.searchsorted(keys, key, side="left"))
    lower = upper - 1
    x0, x1 = float(keys[lower]), float(keys[upper])
    y0, y1 = table.values[lower], table.values[upper]

    interpolated = y0 + (y1 - y0) * (key - x0) / (x1 - x0)
    logger.debug(f"{table.name}: interpolated key {key:.3f} between {x0:g} and {x1:g}")
    return Breakpoints(*(float(v) for v in interpolated))
