# -*- coding: utf-8 -*-
# utils/logger.py
import logging
import os
from datetime import datetime

from utils.helpers import ensure_directory


def setup_logging(log_dir: str = "logs", level: int = logging.INFO):
    """Configure file + console logging for the desktop and server entry points"""
    ensure_directory(log_dir)

    log_file = os.path.join(log_dir, f"sheet_yield_{datetime.now().strftime('%Y%m%d')}.log")

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file, encoding='utf-8'),
            logging.StreamHandler()
        ]
    )

    # Chatty third-party loggers
    logging.getLogger('matplotlib').setLevel(logging.WARNING)
    logging.getLogger('reportlab').setLevel(logging.WARNING)

    return logging.getLogger(__name__)
