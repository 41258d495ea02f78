"""
Web module of the sheet yield calculator
"""

from .utils import (
    request_data,
    form_values,
    to_data_uri
)
from .routes import configure_routes

__all__ = [
    'request_data',
    'form_values',
    'to_data_uri',
    'configure_routes'
]
