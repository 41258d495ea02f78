# -*- coding: utf-8 -*-
# core/config.py
from dataclasses import dataclass, field
from typing import List, Tuple

# Standard press sheets (width × height in mm)
SHEET_SIZES: List[Tuple[str, float, float]] = [
    ("1030 × 540 mm", 1030, 540),
    ("930 × 630 mm", 930, 630),
    ("1000 × 700 mm", 1000, 700),
    ("700 × 500 mm", 700, 500),
    ("540 × 515 mm", 540, 515),
    ("540 × 343 mm", 540, 343),
    ("630 × 465 mm", 630, 465),
    ("630 × 310 mm", 630, 310),
]

# Two results are "the same" when they differ by less than this (percentage points)
EFFICIENCY_TOLERANCE = 0.01

CUSTOM_FORMAT_SUFFIX = "(Eigenes)"

THEMES = ('light', 'dark')


@dataclass
class AppConfig:
    app_name: str = "Nutzenrechner"
    version: str = "1.0.0"
    debug: bool = False
    preview_width: int = 400
    preview_height: int = 300
    preview_padding: int = 40
    default_registration: float = 0.0
    default_gripper_width: float = 0.0
    default_gripper_side: str = 'none'
    gripper_sides: List[str] = field(default_factory=lambda: [
        'none', 'top', 'bottom', 'left', 'right'
    ])
