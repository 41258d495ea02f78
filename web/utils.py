"""
Helpers for the web interface
"""
import base64
import logging

from flask import request

logger = logging.getLogger(__name__)

MIME_TYPES = {
    'svg': 'image/svg+xml',
    'png': 'image/png',
}

# Form fields the calculator understands
FORM_FIELDS = (
    'product_width', 'product_height', 'quantity',
    'registration', 'gripper_width', 'gripper_side',
)


def request_data() -> dict:
    """JSON body, form body or query string, whichever the client sent"""
    if request.is_json:
        data = request.get_json(silent=True) or {}
        return data if isinstance(data, dict) else {}
    if request.form:
        return request.form.to_dict()
    return request.args.to_dict()


def form_values(data: dict) -> dict:
    """Values echoed back into the form, as strings"""
    return {name: '' if data.get(name) is None else str(data.get(name)) for name in FORM_FIELDS}


def to_data_uri(payload: bytes, image_format: str) -> str:
    """Embed rendered preview bytes for the browser"""
    encoded = base64.b64encode(payload).decode()
    return f"data:{MIME_TYPES[image_format]};base64,{encoded}"
