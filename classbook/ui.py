import logging

import tkinter as tk
from tkinter import messagebox, ttk

from classbook.constants import (
    RECORDS_APP_NAME,
    RECORDS_FILE,
    COLUMNS,
    RECORDS_WINDOW_WIDTH,
    RECORDS_WINDOW_HEIGHT,
    DEFAULT_FONT,
)
from classbook.export import export_records
from classbook.logic import RecordStore

logger = logging.getLogger(__name__)


class StudentRecordApp:
    def __init__(self, master, filepath=RECORDS_FILE):
        self.master = master
        master.title(RECORDS_APP_NAME)
        master.geometry(f"{RECORDS_WINDOW_WIDTH}x{RECORDS_WINDOW_HEIGHT}")
        master.option_add('*Font', DEFAULT_FONT)

        self.store = RecordStore(filepath, notify=messagebox.showerror)

        button_style = {"relief": "raised", "bd": 1, "padx": 8, "pady": 3}

        tk.Button(
            master, text="Delete", **button_style,
            command=self.delete_selected
        ).pack(side="top", fill="x")

        self.create_records_tree()
        self.create_input_panel(button_style)

        self.store.load()
        self.refresh_table()

    def create_records_tree(self):
        tree_frame = tk.Frame(self.master)
        tree_frame.pack(side="top", fill="both", expand=True)

        self.records_tree = ttk.Treeview(
            tree_frame,
            columns=COLUMNS,
            show="headings",
            selectmode="browse",
            height=10
        )

        for column in COLUMNS:
            self.records_tree.heading(column, text=column, anchor="center")
            self.records_tree.column(column, width=105, anchor="center")

        tree_scrollbar = ttk.Scrollbar(tree_frame, orient="vertical", command=self.records_tree.yview)
        self.records_tree.configure(yscrollcommand=tree_scrollbar.set)

        self.records_tree.pack(side="left", fill="both", expand=True)
        tree_scrollbar.pack(side="right", fill="y")

    def create_input_panel(self, button_style):
        panel = tk.Frame(self.master)
        panel.pack(side="bottom", fill="x")

        self.entries = []
        for col_idx, column in enumerate(COLUMNS):
            tk.Label(panel, text=column).grid(row=0, column=col_idx, padx=2, pady=2, sticky="w")
            entry = tk.Entry(panel, width=12)
            entry.grid(row=1, column=col_idx, padx=2, pady=2, sticky="ew")
            panel.columnconfigure(col_idx, weight=1)
            self.entries.append(entry)

        tk.Button(
            panel, text="Add", **button_style,
            command=self.add_record
        ).grid(row=1, column=len(COLUMNS), padx=2, pady=2)

        tk.Button(
            panel, text="Export", **button_style,
            command=self.export_data
        ).grid(row=0, column=len(COLUMNS), padx=2, pady=2)

        self.entries[-1].bind("<Return>", lambda event: self.add_record())

    def refresh_table(self):
        for item in self.records_tree.get_children():
            self.records_tree.delete(item)

        for record in self.store.records:
            self.records_tree.insert("", "end", values=record.to_row())

    def selected_index(self):
        selection = self.records_tree.selection()
        if not selection:
            return None
        return self.records_tree.index(selection[0])

    def add_record(self):
        values = [entry.get() for entry in self.entries]
        self.store.add(*values)
        self.refresh_table()
        self.clear_fields()

    def delete_selected(self):
        index = self.selected_index()
        if index is None:
            return
        self.store.remove_selected(index)
        self.refresh_table()

    def clear_fields(self):
        for entry in self.entries:
            entry.delete(0, tk.END)
        self.entries[0].focus_set()

    def export_data(self):
        try:
            file_path = export_records(self.store.records)
            messagebox.showinfo("Export", f"Records exported to:\n{file_path}")
        except Exception as e:
            logger.exception("Export failed")
            messagebox.showerror("Error", f"Failed to export records:\n{e}")
