from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import numpy as np


@dataclass
class CellGrid:
    rgb: np.ndarray  # (rows, cols, 3) uint8

    @property
    def rows(self) -> int:
        return self.rgb.shape[0]

    @property
    def cols(self) -> int:
        return self.rgb.shape[1]


class Encoder(Protocol):
    def encode(self, grid: CellGrid) -> str:
        """Serialize a sampled grid to text."""
        ...
