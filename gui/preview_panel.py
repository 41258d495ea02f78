# -*- coding: utf-8 -*-
# gui/preview_panel.py
import tkinter as tk
from tkinter import ttk
import logging

from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

from core.exceptions import PreviewError
from core.preview import build_preview
from services.preview_service import PreviewRenderer, preview_details

logger = logging.getLogger(__name__)


class PreviewPanel:
    def __init__(self, parent, main_window):
        self.parent = parent
        self.main_window = main_window
        self.renderer = PreviewRenderer()
        self.setup_ui()

    def setup_ui(self):
        """Title, matplotlib canvas and caption"""
        self.title_var = tk.StringVar(value="Vorschau: Zeile in der Tabelle wählen")
        ttk.Label(self.parent, textvariable=self.title_var,
                  font=("Arial", 11, "bold")).pack(fill=tk.X, pady=5)

        config = self.main_window.app_config
        self.figure = Figure(figsize=(config.preview_width / 100, config.preview_height / 100), dpi=100)
        self.ax = self.figure.add_axes([0, 0, 1, 1])
        self.ax.axis('off')

        self.canvas = FigureCanvasTkAgg(self.figure, master=self.parent)
        self.canvas.get_tk_widget().pack(fill=tk.BOTH, expand=True)

        self.details_var = tk.StringVar(value="")
        ttk.Label(self.parent, textvariable=self.details_var, justify=tk.CENTER,
                  font=("Courier", 9)).pack(pady=5)

    def clear(self):
        self.ax.clear()
        self.ax.axis('off')
        self.canvas.draw_idle()
        self.title_var.set("Vorschau: Zeile in der Tabelle wählen")
        self.details_var.set("")

    def show(self, result, product, margins):
        """Draw the layout the calculator produced for the selected row"""
        config = self.main_window.app_config
        try:
            geometry = build_preview(result, product, margins, config.preview_width,
                                     config.preview_height, config.preview_padding)
        except PreviewError as e:
            self.clear()
            self.main_window.show_message(str(e))
            return

        self.renderer.dark_mode = self.main_window.settings.dark_mode
        self.renderer.draw(self.ax, geometry)
        self.canvas.draw_idle()

        details = preview_details(geometry)
        self.title_var.set(details['title'])
        self.details_var.set(f"{details['pieces_text']}\n{details['layout_text']}\n"
                             f"Flächenausnutzung: {details['efficiency_text']}")
        logger.debug(f"Preview shown: {details['title']}")
