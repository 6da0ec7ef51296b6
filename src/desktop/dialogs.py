"""
Minesweeper Dialogs
Custom board size entry and best-time display
"""

import tkinter as tk
from tkinter import Button, Frame, Label, Listbox, Scrollbar, Toplevel, messagebox
from tkinter import simpledialog
from typing import Dict, Optional

from minefield.config import HEIGHT_RANGE, WIDTH_RANGE, GameConfig, clamp_custom


def format_time(seconds: int) -> str:
    """Format time as MM:SS"""
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


class CustomBoardDialog(simpledialog.Dialog):
    """Asks for width, height and mines; out-of-range values are clamped silently"""

    def __init__(self, parent, current: GameConfig):
        self.current = current
        self.result: Optional[GameConfig] = None
        super().__init__(parent, title="Custom Board")

    def body(self, master):
        self.entries = {}
        fields = [
            ('Width', self.current.width, f"{WIDTH_RANGE[0]}-{WIDTH_RANGE[1]}"),
            ('Height', self.current.height, f"{HEIGHT_RANGE[0]}-{HEIGHT_RANGE[1]}"),
            ('Mines', self.current.mines, "1-(w*h-1)"),
        ]
        for row, (name, value, hint) in enumerate(fields):
            Label(master, text=f"{name}:").grid(row=row, column=0, sticky='w', padx=5, pady=2)
            entry = tk.Entry(master, width=6)
            entry.insert(0, str(value))
            entry.grid(row=row, column=1, padx=5, pady=2)
            Label(master, text=hint, fg='gray').grid(row=row, column=2, sticky='w')
            self.entries[name] = entry
        return self.entries['Width']

    def apply(self):
        self.result = clamp_custom(
            self.entries['Width'].get(),
            self.entries['Height'].get(),
            self.entries['Mines'].get(),
        )


class BestTimesDialog:
    """Dialog window listing the best time for every board played"""

    def __init__(self, parent, records: Dict[str, int], current_key: Optional[str] = None):
        self.records = records
        self.current_key = current_key

        self.dialog = Toplevel(parent)
        self.dialog.title("Best Times")
        self.dialog.resizable(False, False)
        self.dialog.transient(parent)
        self.dialog.grab_set()
        self.dialog.geometry("+%d+%d" % (parent.winfo_rootx() + 50, parent.winfo_rooty() + 50))

        self._create_widgets()
        self._update_display()

    def _create_widgets(self):
        Label(self.dialog, text="🏆 Best Times", font=("Arial", 16, "bold")).pack(pady=10)

        list_frame = Frame(self.dialog)
        list_frame.pack(fill="both", expand=True, padx=20, pady=10)

        self.listbox = Listbox(list_frame, font=("Courier", 10), height=12, width=30)
        scrollbar = Scrollbar(list_frame, orient="vertical", command=self.listbox.yview)
        self.listbox.configure(yscrollcommand=scrollbar.set)
        self.listbox.pack(side="left", fill="both", expand=True)
        scrollbar.pack(side="right", fill="y")

        Button(self.dialog, text="Close", command=self.dialog.destroy).pack(pady=10)

    def _update_display(self):
        self.listbox.delete(0, tk.END)
        if not self.records:
            self.listbox.insert(tk.END, "  No times recorded yet")
            return

        for key, seconds in sorted(self.records.items(), key=lambda item: item[1]):
            marker = '*' if key == self.current_key else ' '
            self.listbox.insert(tk.END, f"{marker} {key:<14} {format_time(seconds)}")


def show_best_times(parent, records: Dict[str, int], current_key: Optional[str] = None):
    BestTimesDialog(parent, records, current_key)


def congratulate_new_record(key: str, seconds: int):
    """Show congratulations for a new best time"""
    messagebox.showinfo("🎉 NEW RECORD!",
                        f"Congratulations! New best time on {key}.\n\nTime: {format_time(seconds)}")
