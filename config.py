"""
Application settings for the sheet yield calculator
"""
import os
from pathlib import Path

# Base paths - Docker puts the app under /app
if os.path.exists('/app'):
    BASE_DIR = Path('/app')
else:
    BASE_DIR = Path(__file__).parent

DATA_FOLDER = Path(os.getenv('SHEET_CALC_DATA_DIR', BASE_DIR / 'data'))
LOG_FOLDER = Path(os.getenv('SHEET_CALC_LOG_DIR', BASE_DIR / 'logs'))

# Persisted user state
CUSTOM_FORMATS_FILE = DATA_FOLDER / 'custom_formats.json'
SETTINGS_FILE = DATA_FOLDER / 'settings.json'

# Web settings
SECRET_KEY = os.getenv('SECRET_KEY', 'change-me-in-production')
FLASK_HOST = os.getenv('FLASK_HOST', '0.0.0.0')
FLASK_PORT = int(os.getenv('FLASK_PORT', 5000))
API_PORT = int(os.getenv('API_PORT', 8000))

# Plain basicConfig settings for the server entry points
LOGGING_CONFIG = {
    'level': os.getenv('LOG_LEVEL', 'INFO'),
    'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    'datefmt': '%Y-%m-%d %H:%M:%S'
}
