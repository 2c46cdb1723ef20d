import tkinter as tk
from tkinter import messagebox

from PIL import Image, ImageDraw, ImageTk

from classbook.attendance import record_attendance
from classbook.constants import (
    ATTENDANCE_APP_NAME,
    ATTENDANCE_TITLE,
    ATTENDANCE_SUBTITLE,
    FOOTER_TEXT,
    TIME_IN_PLACEHOLDER,
    SIGNATURE_PLACEHOLDER,
    ATTENDANCE_WINDOW_WIDTH,
    ATTENDANCE_WINDOW_HEIGHT,
    TITLE_FONT,
    SUBTITLE_FONT,
    LABEL_FONT,
    ENTRY_FONT,
    SIGNATURE_FONT,
    BUTTON_FONT,
    FOOTER_FONT,
    PRIMARY_COLOR,
    SECONDARY_COLOR,
    DANGER_COLOR,
    DANGER_HOVER_COLOR,
    BACKGROUND_COLOR,
    TEXT_COLOR,
    MUTED_COLOR,
    READONLY_BG,
)
from classbook.exceptions import ValidationError


def make_check_icon(size=60):
    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    draw.ellipse((5, 5, size - 5, size - 5), fill=PRIMARY_COLOR)
    draw.line([(18, 30), (26, 38), (42, 18)], fill="white", width=4)
    return img


class AttendanceTrackerApp:
    def __init__(self, master):
        self.master = master
        master.title(ATTENDANCE_APP_NAME)
        master.geometry(f"{ATTENDANCE_WINDOW_WIDTH}x{ATTENDANCE_WINDOW_HEIGHT}")
        master.minsize(ATTENDANCE_WINDOW_WIDTH, ATTENDANCE_WINDOW_HEIGHT)
        master.configure(bg=BACKGROUND_COLOR)

        main_frame = tk.Frame(master, bg=BACKGROUND_COLOR, padx=40, pady=30)
        main_frame.pack(fill="both", expand=True)

        self.create_header(main_frame)
        self.create_form(main_frame)
        self.create_buttons(main_frame)

        footer = tk.Frame(master, bg=READONLY_BG, pady=15)
        footer.pack(side="bottom", fill="x")
        tk.Label(footer, text=FOOTER_TEXT, font=FOOTER_FONT,
                 fg=MUTED_COLOR, bg=READONLY_BG).pack()

        self.name_entry.focus_set()

    def create_header(self, parent):
        header = tk.Frame(parent, bg=BACKGROUND_COLOR)
        header.pack(fill="x", pady=(0, 20))

        title_row = tk.Frame(header, bg=BACKGROUND_COLOR)
        title_row.pack()

        self.icon_image = ImageTk.PhotoImage(make_check_icon())
        tk.Label(title_row, image=self.icon_image, bg=BACKGROUND_COLOR).pack(side="left", padx=8)

        tk.Label(title_row, text=ATTENDANCE_TITLE, font=TITLE_FONT,
                 fg=TEXT_COLOR, bg=BACKGROUND_COLOR).pack(side="left", padx=8)

        tk.Label(header, text=ATTENDANCE_SUBTITLE, font=SUBTITLE_FONT,
                 fg=MUTED_COLOR, bg=BACKGROUND_COLOR).pack()

    def create_form(self, parent):
        form = tk.Frame(parent, bg=BACKGROUND_COLOR)
        form.pack(fill="both", expand=True)
        form.columnconfigure(1, weight=1)

        self.name_entry = self._form_row(form, 0, "👤 Full Name")
        self.course_entry = self._form_row(form, 1, "📚 Course/Year")
        self.time_in_entry = self._form_row(form, 2, "🕐 Time In", readonly=True)
        self.signature_entry = self._form_row(form, 3, "🔐 E-Signature", readonly=True, font=SIGNATURE_FONT)

        self.reset_generated_fields()

    def _form_row(self, form, row, text, readonly=False, font=ENTRY_FONT):
        tk.Label(form, text=text, font=LABEL_FONT, fg=TEXT_COLOR,
                 bg=BACKGROUND_COLOR).grid(row=row, column=0, padx=15, pady=12, sticky="w")

        entry = tk.Entry(
            form, font=font, fg=MUTED_COLOR if readonly else TEXT_COLOR,
            relief="solid", bd=1, highlightthickness=2,
            highlightcolor=PRIMARY_COLOR, highlightbackground="#cbd5e1"
        )
        if readonly:
            entry.configure(readonlybackground=READONLY_BG)
        entry.grid(row=row, column=1, padx=15, pady=12, sticky="ew", ipady=8)
        return entry

    def create_buttons(self, parent):
        button_frame = tk.Frame(parent, bg=BACKGROUND_COLOR)
        button_frame.pack(pady=20)

        self._styled_button(button_frame, "✓ Submit Attendance", PRIMARY_COLOR, SECONDARY_COLOR,
                            self.submit_attendance).pack(side="left", padx=10)
        self._styled_button(button_frame, "↻ Clear Form", DANGER_COLOR, DANGER_HOVER_COLOR,
                            self.clear_form).pack(side="left", padx=10)

    def _styled_button(self, parent, text, bg, hover_bg, command):
        button = tk.Button(
            parent, text=text, font=BUTTON_FONT, fg="white", bg=bg,
            activebackground=hover_bg, activeforeground="white",
            relief="flat", bd=0, padx=30, pady=12, cursor="hand2",
            command=command
        )
        button.bind("<Enter>", lambda event: button.config(bg=hover_bg))
        button.bind("<Leave>", lambda event: button.config(bg=bg))
        return button

    def _set_readonly(self, entry, text):
        entry.configure(state="normal")
        entry.delete(0, tk.END)
        entry.insert(0, text)
        entry.configure(state="readonly")

    def reset_generated_fields(self):
        self._set_readonly(self.time_in_entry, TIME_IN_PLACEHOLDER)
        self._set_readonly(self.signature_entry, SIGNATURE_PLACEHOLDER)

    def submit_attendance(self):
        try:
            entry = record_attendance(self.name_entry.get(), self.course_entry.get())
        except ValidationError as e:
            messagebox.showerror("Validation Error", str(e))
            if e.field == "name":
                self.name_entry.focus_set()
            else:
                self.course_entry.focus_set()
            return

        self._set_readonly(self.time_in_entry, entry.time_in)
        self._set_readonly(self.signature_entry, entry.signature)

        messagebox.showinfo(
            "Attendance Recorded",
            "✓ Success!\nAttendance recorded successfully\n\n"
            f"Name: {entry.name}\n"
            f"Course: {entry.course}\n"
            f"Time: {entry.time_in}"
        )

    def clear_form(self):
        self.name_entry.delete(0, tk.END)
        self.course_entry.delete(0, tk.END)
        self.reset_generated_fields()
        self.name_entry.focus_set()
        messagebox.showinfo("Form Reset", "Form cleared successfully!")
