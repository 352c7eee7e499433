"""Transform parameters."""

import math
from dataclasses import dataclass
from typing import Literal

from models.errors import InvalidParameter
from utils.constants import OPERATIONS


@dataclass
class TransformParams:
    """Which transform to run and its settings."""

    operation: Literal['grayscale', 'compress', 'merge'] = 'grayscale'
    quality: float = 1.0

    def __post_init__(self):
        if self.operation not in OPERATIONS:
            raise InvalidParameter(
                f"Operation must be one of {', '.join(OPERATIONS)}, got {self.operation!r}"
            )
        if not math.isfinite(self.quality):
            raise InvalidParameter(f"Quality must be a finite number, got {self.quality}")
