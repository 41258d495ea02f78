# utils/helpers.py
import os
import re
import logging

logger = logging.getLogger(__name__)

def ensure_directory(directory: str):
    """Create the directory if it does not exist"""
    try:
        os.makedirs(directory, exist_ok=True)
        logger.debug(f"Directory ensured: {directory}")
    except OSError as e:
        logger.error(f"Error creating directory {directory}: {e}")

def sanitize_filename(filename: str) -> str:
    """Turn a format label like '1000 × 700 mm' into a safe file name"""
    invalid_chars = '<>:"/\\|?*'
    for char in invalid_chars:
        filename = filename.replace(char, '_')
    filename = filename.replace('×', 'x')
    filename = re.sub(r'[()]', '', filename)
    filename = re.sub(r'\s+', '_', filename.strip())
    return filename or 'layout'
