"""
Data classes and enums for sheet layout calculation
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Orientation(Enum):
    NORMAL = "h"
    ROTATED = "v"


class GripperSide(Enum):
    NONE = "none"
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @property
    def is_horizontal(self) -> bool:
        """Gripper on the left/right edge eats into the sheet width."""
        return self in (GripperSide.LEFT, GripperSide.RIGHT)


class LayoutStatus(Enum):
    OK = "ok"
    NO_FIT = "no_fit"
    INSUFFICIENT_MARGIN = "insufficient_margin"


@dataclass(frozen=True)
class SheetFormat:
    name: str
    width: float
    height: float
    custom: bool = False

    def to_dict(self) -> dict:
        return {'name': self.name, 'width': self.width, 'height': self.height}


@dataclass(frozen=True)
class MarginConfig:
    registration: float = 0.0
    gripper_width: float = 0.0
    gripper_side: GripperSide = GripperSide.NONE

    @property
    def gripper_applies(self) -> bool:
        return self.gripper_width > 0 and self.gripper_side is not GripperSide.NONE


@dataclass(frozen=True)
class Product:
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    def oriented(self, orientation: Orientation):
        if orientation is Orientation.ROTATED:
            return self.height, self.width
        return self.width, self.height


@dataclass
class LayoutResult:
    sheet_format: SheetFormat
    orientation: Orientation
    usable_width: float
    usable_height: float
    columns: int = 0
    rows: int = 0
    pieces: int = 0
    efficiency_percent: float = 0.0
    required_sheets: Optional[int] = None
    status: LayoutStatus = LayoutStatus.OK
    duplicate: bool = False
    recommended: bool = False

    @property
    def fits(self) -> bool:
        return self.status is LayoutStatus.OK

    def to_dict(self) -> dict:
        return {
            'format': self.sheet_format.name,
            'sheet_width': self.sheet_format.width,
            'sheet_height': self.sheet_format.height,
            'orientation': self.orientation.value,
            'usable_width': self.usable_width,
            'usable_height': self.usable_height,
            'columns': self.columns,
            'rows': self.rows,
            'pieces': self.pieces,
            'efficiency_percent': self.efficiency_percent,
            'required_sheets': self.required_sheets,
            'status': self.status.value,
            'fits': self.fits,
            'duplicate': self.duplicate,
            'recommended': self.recommended,
        }


@dataclass
class CalculationResult:
    product: Product
    margins: MarginConfig
    quantity: Optional[int] = None
    results: List[LayoutResult] = field(default_factory=list)
    candidates: List[LayoutResult] = field(default_factory=list)

    @property
    def recommended(self) -> List[LayoutResult]:
        return [r for r in self.candidates if r.recommended]

    @property
    def best(self) -> Optional[LayoutResult]:
        return self.candidates[0] if self.candidates else None

    def for_format(self, sheet_format: SheetFormat) -> List[LayoutResult]:
        return [r for r in self.results if r.sheet_format == sheet_format]

    def get(self, format_index: int, orientation: Orientation) -> LayoutResult:
        """Result for the n-th format of the catalog in the given orientation."""
        offset = 0 if orientation is Orientation.NORMAL else 1
        return self.results[format_index * 2 + offset]
