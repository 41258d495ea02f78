"""
Flask application of the sheet yield calculator
"""
import logging
import os
import sys
from pathlib import Path

# Make the project root importable when started as a script
current_dir = os.path.dirname(os.path.abspath(__file__))
if current_dir not in sys.path:
    sys.path.insert(0, current_dir)

from config import LOGGING_CONFIG, SECRET_KEY, CUSTOM_FORMATS_FILE, SETTINGS_FILE

logging.basicConfig(**LOGGING_CONFIG)
logger = logging.getLogger(__name__)


def create_app(custom_formats_file=None, settings_file=None):
    """Create the Flask application with its catalog and settings stores"""
    from flask import Flask
    from core.config import AppConfig
    from core.format_catalog import FormatCatalog
    from core.settings_store import SettingsStore
    from web.routes import configure_routes

    app = Flask(__name__, template_folder=str(Path(current_dir) / 'web' / 'templates'))
    app.secret_key = SECRET_KEY
    app.config['SHEET_CALC'] = AppConfig()

    catalog = FormatCatalog(custom_formats_file or CUSTOM_FORMATS_FILE)
    settings = SettingsStore(settings_file or SETTINGS_FILE)

    configure_routes(app, catalog, settings)

    logger.info(f"Sheet yield calculator initialized, {len(catalog)} sheet formats")
    return app
