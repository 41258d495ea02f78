# -*- coding: utf-8 -*-
# gui/main_window.py
import tkinter as tk
from tkinter import ttk
import logging

from core.config import AppConfig
from core.exceptions import ValidationError
from core.input_parser import is_blank_product, parse_orientation
from services.layout_service import LayoutService
from gui.preview_panel import PreviewPanel

logger = logging.getLogger(__name__)

COLUMNS = (
    ('format', "Druckbogen", 140),
    ('orientation_label', "Ausrichtung", 170),
    ('pieces_text', "Nutzen", 170),
    ('layout_text', "Anordnung", 190),
    ('efficiency_text', "Flächenausnutzung", 130),
)

THEME_COLORS = {
    'light': {'background': '#ffffff', 'foreground': '#111827', 'recommendation': '#dcfce7',
              'alt': '#f3f4f6'},
    'dark': {'background': '#111827', 'foreground': '#e5e7eb', 'recommendation': '#14532d',
             'alt': '#1f2937'},
}


class MainWindow:
    def __init__(self, root, catalog, settings, app_config: AppConfig = None):
        self.root = root
        self.catalog = catalog
        self.settings = settings
        self.app_config = app_config or AppConfig()
        self.layout_service = LayoutService(catalog)
        self.calculation = None

        self.root.title(f"{self.app_config.app_name} v{self.app_config.version}")
        self.root.geometry("1000x720")
        self.root.minsize(800, 600)

        self.style = ttk.Style(self.root)
        self.setup_ui()
        self.apply_theme()
        self.recalc()

    def setup_ui(self):
        """Inputs on top, result table and preview below"""
        top = ttk.Frame(self.root, padding=10)
        top.pack(fill=tk.X)

        self.vars = {}
        fields = (
            ('product_width', "Produktbreite (mm)"),
            ('product_height', "Produkthöhe (mm)"),
            ('quantity', "Menge"),
            ('registration', "Passer (mm)"),
            ('gripper_width', "Greiferkante (mm)"),
        )
        for column, (name, label) in enumerate(fields):
            ttk.Label(top, text=label).grid(row=0, column=column, sticky="w", padx=4)
            var = tk.StringVar(value="")
            var.trace_add('write', lambda *_: self.recalc())
            ttk.Entry(top, textvariable=var, width=12).grid(row=1, column=column, padx=4)
            self.vars[name] = var

        ttk.Label(top, text="Seite").grid(row=0, column=len(fields), sticky="w", padx=4)
        self.vars['gripper_side'] = tk.StringVar(value=self.app_config.default_gripper_side)
        side_combo = ttk.Combobox(top, textvariable=self.vars['gripper_side'],
                                  values=self.app_config.gripper_sides, state="readonly", width=8)
        side_combo.grid(row=1, column=len(fields), padx=4)
        side_combo.bind('<<ComboboxSelected>>', lambda _: self.recalc())

        self.theme_button = ttk.Button(top, command=self.toggle_theme)
        self.theme_button.grid(row=1, column=len(fields) + 1, padx=10)

        self.setup_custom_format(top)

        self.error_var = tk.StringVar(value="")
        ttk.Label(self.root, textvariable=self.error_var, foreground="red").pack(fill=tk.X, padx=10)

        body = ttk.PanedWindow(self.root, orient=tk.HORIZONTAL)
        body.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        table_frame = ttk.Frame(body)
        self.tree = ttk.Treeview(table_frame, columns=[c[0] for c in COLUMNS], show="headings")
        for key, heading, width in COLUMNS:
            self.tree.heading(key, text=heading)
            self.tree.column(key, width=width, anchor="w")
        self.tree.pack(fill=tk.BOTH, expand=True)
        self.tree.bind('<<TreeviewSelect>>', self.on_row_select)
        body.add(table_frame, weight=3)

        preview_frame = ttk.Frame(body)
        body.add(preview_frame, weight=2)
        self.preview_panel = PreviewPanel(preview_frame, self)

    def setup_custom_format(self, parent):
        frame = ttk.LabelFrame(parent, text="Eigenes Format", padding=5)
        frame.grid(row=2, column=0, columnspan=6, sticky="w", pady=8)

        self.custom_width = tk.StringVar()
        self.custom_height = tk.StringVar()
        ttk.Entry(frame, textvariable=self.custom_width, width=10).pack(side=tk.LEFT, padx=2)
        ttk.Label(frame, text="×").pack(side=tk.LEFT)
        ttk.Entry(frame, textvariable=self.custom_height, width=10).pack(side=tk.LEFT, padx=2)
        ttk.Button(frame, text="Format hinzufügen", command=self.add_custom_format).pack(side=tk.LEFT, padx=5)

    def form_data(self) -> dict:
        return {name: var.get() for name, var in self.vars.items()}

    def recalc(self):
        """Recompute everything from the current inputs and refill the table"""
        data = self.form_data()
        self.calculation = None

        if is_blank_product(data['product_width'], data['product_height']):
            self.show_message("")
            self.fill_table(self.layout_service.placeholder_rows())
            self.preview_panel.clear()
            return

        try:
            self.calculation = self.layout_service.compute(data)
        except ValidationError as e:
            self.show_message(str(e))
            return

        self.show_message("")
        self.fill_table(LayoutService.build_rows(self.calculation, self.catalog.formats))

    def fill_table(self, rows):
        self.tree.delete(*self.tree.get_children())
        for row in rows:
            if row['hidden']:
                continue
            tags = []
            if row['format_index'] % 2:
                tags.append('alt')
            if row['recommended']:
                tags.append('recommendation')
            self.tree.insert('', tk.END, iid=f"{row['format_index']}-{row['orientation']}",
                             values=[row[c[0]] for c in COLUMNS], tags=tags)

    def on_row_select(self, event=None):
        selection = self.tree.selection()
        if not selection or self.calculation is None:
            return
        format_index, orientation = selection[0].split('-')
        result = self.calculation.get(int(format_index), parse_orientation(orientation))
        self.preview_panel.show(result, self.calculation.product, self.calculation.margins)

    def add_custom_format(self):
        try:
            sheet = self.catalog.add_custom_format(self.custom_width.get(), self.custom_height.get())
        except ValidationError as e:
            self.show_message(str(e))
            return
        self.custom_width.set("")
        self.custom_height.set("")
        logger.info(f"Custom format added from desktop UI: {sheet.name}")
        self.recalc()

    def toggle_theme(self):
        self.settings.toggle_theme()
        self.apply_theme()
        self.on_row_select()

    def apply_theme(self):
        colors = THEME_COLORS[self.settings.theme]
        self.root.configure(background=colors['background'])
        self.style.configure('Treeview', background=colors['background'],
                             fieldbackground=colors['background'], foreground=colors['foreground'])
        self.tree.tag_configure('alt', background=colors['alt'])
        self.tree.tag_configure('recommendation', background=colors['recommendation'])
        self.theme_button.configure(text="Light Mode" if self.settings.dark_mode else "Dark Mode")

    def show_message(self, message):
        self.error_var.set(message or "")
        if message:
            logger.info(f"Message shown: {message}")
