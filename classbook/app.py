import logging
import tkinter as tk
from classbook.ui import StudentRecordApp
from classbook.attendance_ui import AttendanceTrackerApp


def _configure_logging():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def main():
    _configure_logging()
    root = tk.Tk()
    app = StudentRecordApp(root)
    root.mainloop()


def run_attendance():
    _configure_logging()
    root = tk.Tk()
    app = AttendanceTrackerApp(root)
    root.mainloop()
