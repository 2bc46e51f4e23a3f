from typing import Dict, NamedTuple, Sequence

import numpy as np

SD_COLUMNS = ("sd3neg", "sd2neg", "sd1neg", "sd0", "sd1", "sd2", "sd3")


class Breakpoints(NamedTuple):
    sd3neg: float
    sd2neg: float
    sd1neg: float
    sd0: float
    sd1: float
    sd2: float
    sd3: float


class ReferenceTable:
    """
    Z-score breakpoints (-3 SD .. +3 SD) indexed by age in months or by
    length/height in cm.

    The backing arrays are read-only; a table never changes after it has
    been built.
    """

    def __init__(self, name: str, rows: Dict[float, Sequence[float]]):
        if not rows:
            raise ValueError(f"Reference table {name} has no rows")

        keys = np.array(list(rows.keys()), dtype=float)
        values = np.array([list(row) for row in rows.values()], dtype=float)

        if values.shape[1] != len(SD_COLUMNS):
            raise ValueError(f"Reference table {name} rows must have {len(SD_COLUMNS)} breakpoints")
        if np.any(np.diff(keys) <= 0):
            raise ValueError(f"Reference table {name} keys must be strictly increasing")
        if np.any(np.diff(values, axis=1) <= 0):
            raise ValueError(f"Reference table {name} breakpoints must be strictly increasing within a row")

        keys.flags.writeable = False
        values.flags.writeable = False
        self.name = name
        self.keys = keys
        self.values = values

    def __len__(self) -> int:
        return len(self.keys)

    def __repr__(self) -> str:
        return f"ReferenceTable({self.name!r}, {self.keys[0]:g}..{self.keys[-1]:g})"

    def row(self, index: int) -> Breakpoints:
        return Breakpoints(*(float(v) for v in self.values[index]))

    def rows(self):
        for index, key in enumerate(self.keys):
            yield float(key), self.row(index)
