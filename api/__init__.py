"""
JSON API of the sheet yield calculator
"""
import logging

from fastapi import FastAPI

from config import CUSTOM_FORMATS_FILE
from core.config import AppConfig
from core.format_catalog import FormatCatalog

from .endpoints import api_router

logger = logging.getLogger(__name__)


def create_api_app(custom_formats_file=None) -> FastAPI:
    config = AppConfig()
    app = FastAPI(title=config.app_name, version=config.version)
    app.state.config = config
    app.state.catalog = FormatCatalog(custom_formats_file or CUSTOM_FORMATS_FILE)
    app.include_router(api_router, prefix="/api/v1")
    logger.info(f"API initialized, {len(app.state.catalog)} sheet formats")
    return app


__all__ = [
    'api_router',
    'create_api_app'
]
