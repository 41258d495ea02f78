# -*- coding: utf-8 -*-
# api/schemas.py
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel

RawValue = Optional[Union[float, str]]


class CalculationRequest(BaseModel):
    product_width: RawValue = None
    product_height: RawValue = None
    quantity: RawValue = None
    registration: RawValue = 0
    gripper_width: RawValue = 0
    gripper_side: str = 'none'


class CalculationResponse(BaseModel):
    success: bool
    rows: List[Dict[str, Any]]
    recommended: List[int] = []
    error: Optional[str] = None


class SheetFormatRequest(BaseModel):
    width: RawValue = None
    height: RawValue = None


class SheetFormatResponse(BaseModel):
    index: int
    name: str
    width: float
    height: float
    custom: bool = False


class PreviewRequest(CalculationRequest):
    format_index: int
    orientation: str = 'h'
    image_format: str = 'svg'


class PreviewResponse(BaseModel):
    title: str
    pieces_text: str
    layout_text: str
    efficiency_text: str
    image: str
