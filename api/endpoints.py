# -*- coding: utf-8 -*-
# api/endpoints.py
import logging
from typing import List

from fastapi import APIRouter, HTTPException, Request

from api.schemas import (
    CalculationRequest, CalculationResponse, PreviewRequest, PreviewResponse,
    SheetFormatRequest, SheetFormatResponse
)
from core.exceptions import PreviewError, ValidationError
from core.input_parser import parse_orientation
from core.preview import build_preview
from services.layout_service import LayoutService
from services.preview_service import PreviewRenderer, preview_details
from web.utils import to_data_uri

logger = logging.getLogger(__name__)

api_router = APIRouter()


def _layout_service(request: Request) -> LayoutService:
    return LayoutService(request.app.state.catalog)


@api_router.post("/calculate", response_model=CalculationResponse)
async def calculate(payload: CalculationRequest, request: Request):
    response = _layout_service(request).calculate(payload.model_dump())
    if not response['success']:
        raise HTTPException(400, response['error'])
    return CalculationResponse(**response)


@api_router.get("/formats", response_model=List[SheetFormatResponse])
async def list_formats(request: Request):
    catalog = request.app.state.catalog
    return [
        SheetFormatResponse(index=i, name=fmt.name, width=fmt.width, height=fmt.height,
                            custom=fmt.custom)
        for i, fmt in enumerate(catalog.formats)
    ]


@api_router.post("/formats", response_model=SheetFormatResponse, status_code=201)
def add_format(payload: SheetFormatRequest, request: Request):
    catalog = request.app.state.catalog
    try:
        sheet = catalog.add_custom_format(payload.width, payload.height)
    except ValidationError as e:
        raise HTTPException(400, str(e))
    return SheetFormatResponse(index=len(catalog) - 1, name=sheet.name, width=sheet.width,
                               height=sheet.height, custom=True)


@api_router.post("/preview", response_model=PreviewResponse)
def preview(payload: PreviewRequest, request: Request):
    if payload.image_format not in ('svg', 'png'):
        raise HTTPException(400, f"Unsupported image format: {payload.image_format}")

    config = request.app.state.config
    try:
        calculation, result = _layout_service(request).result_for(
            payload.model_dump(), payload.format_index, parse_orientation(payload.orientation)
        )
        geometry = build_preview(result, calculation.product, calculation.margins,
                                 config.preview_width, config.preview_height,
                                 config.preview_padding)
    except (ValidationError, PreviewError) as e:
        raise HTTPException(400, str(e))

    image = PreviewRenderer().render(geometry, payload.image_format)
    details = preview_details(geometry)
    return PreviewResponse(image=to_data_uri(image, payload.image_format), **details)


@api_router.get("/health")
async def health(request: Request):
    config = request.app.state.config
    return {"status": "ok", "app": config.app_name, "version": config.version,
            "formats": len(request.app.state.catalog)}
