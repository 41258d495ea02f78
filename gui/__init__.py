# -*- coding: utf-8 -*-
# gui/__init__.py
from .main_window import MainWindow


def main():
    import tkinter as tk
    from config import CUSTOM_FORMATS_FILE, SETTINGS_FILE, LOG_FOLDER
    from core.format_catalog import FormatCatalog
    from core.settings_store import SettingsStore
    from utils.logger import setup_logging

    setup_logging(str(LOG_FOLDER))
    root = tk.Tk()
    MainWindow(root, FormatCatalog(CUSTOM_FORMATS_FILE), SettingsStore(SETTINGS_FILE))
    root.mainloop()


if __name__ == "__main__":
    main()
