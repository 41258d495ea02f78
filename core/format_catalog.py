"""
Sheet format catalog: built-in press sheets plus user-defined formats
"""
import json
import logging
import math
import threading
from pathlib import Path
from typing import List, Optional, Union

from .config import SHEET_SIZES, CUSTOM_FORMAT_SUFFIX
from .exceptions import PersistedCatalogCorrupt, ValidationError
from .input_parser import parse_decimal
from .models import SheetFormat

logger = logging.getLogger(__name__)


class FormatCatalog:
    def __init__(self, storage_path: Optional[Union[str, Path]] = None):
        self.storage_path = Path(storage_path) if storage_path else None
        self._lock = threading.Lock()
        self._builtin = [SheetFormat(name, width, height) for name, width, height in SHEET_SIZES]
        self._custom: List[SheetFormat] = []
        self.load()

    @property
    def builtin_formats(self) -> List[SheetFormat]:
        return list(self._builtin)

    @property
    def custom_formats(self) -> List[SheetFormat]:
        return list(self._custom)

    @property
    def formats(self) -> List[SheetFormat]:
        return self._builtin + self._custom

    def __len__(self):
        return len(self._builtin) + len(self._custom)

    def get(self, index: int) -> SheetFormat:
        formats = self.formats
        if not 0 <= index < len(formats):
            raise ValidationError(f"Unbekanntes Format: {index}")
        return formats[index]

    def load(self):
        """Read custom formats; a broken file is logged and ignored"""
        self._custom = []
        if not self.storage_path or not self.storage_path.exists():
            return

        try:
            self._custom = self._read_custom_formats(self.storage_path)
            logger.info(f"Loaded {len(self._custom)} custom formats from {self.storage_path}")
        except PersistedCatalogCorrupt as e:
            logger.error(f"Custom formats ignored, using built-in catalog only: {e}")

    @staticmethod
    def _read_custom_formats(path: Path) -> List[SheetFormat]:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                records = json.load(f)
        except (OSError, ValueError) as e:
            raise PersistedCatalogCorrupt(f"{path}: {e}") from e

        if not isinstance(records, list):
            raise PersistedCatalogCorrupt(f"{path}: expected a list of formats")

        formats = []
        for record in records:
            try:
                name = str(record['name'])
                width = float(record['width'])
                height = float(record['height'])
            except (TypeError, KeyError, ValueError) as e:
                raise PersistedCatalogCorrupt(f"{path}: invalid record {record!r}") from e
            if not (math.isfinite(width) and math.isfinite(height)) or width <= 0 or height <= 0:
                raise PersistedCatalogCorrupt(f"{path}: invalid size in {record!r}")
            formats.append(SheetFormat(name, width, height, custom=True))
        return formats

    def save(self):
        with self._lock:
            self._write()

    def _write(self):
        # caller holds self._lock
        if not self.storage_path:
            return
        self.storage_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.storage_path, 'w', encoding='utf-8') as f:
            json.dump([fmt.to_dict() for fmt in self._custom], f, indent=2, ensure_ascii=False)
        logger.debug(f"Custom formats saved: {self.storage_path}")

    @staticmethod
    def make_custom_format(width, height) -> SheetFormat:
        """Larger side becomes the width, label from the rounded size"""
        raw_width = parse_decimal(width)
        raw_height = parse_decimal(height)
        if raw_width is None or raw_width <= 0 or raw_height is None or raw_height <= 0:
            raise ValidationError("Bitte gültige Breite und Höhe für das eigene Format eingeben.")

        sheet_width = max(raw_width, raw_height)
        sheet_height = min(raw_width, raw_height)
        name = f"{_round_half_up(sheet_width)} × {_round_half_up(sheet_height)} mm {CUSTOM_FORMAT_SUFFIX}"
        return SheetFormat(name, sheet_width, sheet_height, custom=True)

    def add_custom_format(self, width, height) -> SheetFormat:
        sheet = self.make_custom_format(width, height)
        with self._lock:
            self._custom = self._custom + [sheet]
            try:
                self._write()
            except OSError as e:
                logger.error(f"Could not save custom formats: {e}")
        logger.info(f"Custom format added: {sheet.name}")
        return sheet

    def clear_custom_formats(self):
        with self._lock:
            self._custom = []
            self._write()
        logger.info("Custom formats cleared")


def _round_half_up(value: float) -> int:
    # Python's round() rounds half to even; labels round 0.5 up
    return int(value + 0.5)
