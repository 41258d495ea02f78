# -*- coding: utf-8 -*-
# core/settings_store.py
import json
import logging
import threading
from pathlib import Path
from typing import Optional, Union

from .config import THEMES

logger = logging.getLogger(__name__)


class SettingsStore:
    """Process-wide UI preferences, loaded once and saved on every change"""

    def __init__(self, storage_path: Optional[Union[str, Path]] = None):
        self.storage_path = Path(storage_path) if storage_path else None
        self._lock = threading.Lock()
        self.theme = 'light'
        self.load()

    @property
    def dark_mode(self) -> bool:
        return self.theme == 'dark'

    def load(self):
        if not self.storage_path or not self.storage_path.exists():
            return
        try:
            with open(self.storage_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            theme = data.get('theme', 'light') if isinstance(data, dict) else 'light'
            self.theme = theme if theme in THEMES else 'light'
        except (OSError, ValueError) as e:
            logger.error(f"Settings ignored, using defaults: {e}")
            self.theme = 'light'

    def save(self):
        if not self.storage_path:
            return
        with self._lock:
            self.storage_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.storage_path, 'w', encoding='utf-8') as f:
                json.dump({'theme': self.theme}, f, indent=2)

    def set_theme(self, theme: str):
        if theme not in THEMES:
            raise ValueError(f"Unknown theme: {theme}")
        self.theme = theme
        self.save()
        logger.info(f"Theme set to {theme}")

    def toggle_theme(self) -> str:
        self.set_theme('light' if self.dark_mode else 'dark')
        return self.theme
