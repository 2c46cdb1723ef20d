import uuid
from datetime import datetime

from classbook.constants import TIME_IN_FORMAT
from classbook.exceptions import ValidationError
from classbook.models import AttendanceEntry


def validate_attendance_form(name, course):
    if not (name or "").strip():
        return False, "Please enter your name!"

    if not (course or "").strip():
        return False, "Please enter your course/year!"

    return True, ""


def format_time_in(moment=None):
    moment = moment or datetime.now()
    return moment.strftime(TIME_IN_FORMAT)


def generate_signature():
    return str(uuid.uuid4()).upper()


def record_attendance(name, course, now=None):
    ok, message = validate_attendance_form(name, course)
    if not ok:
        field = "name" if not (name or "").strip() else "course"
        raise ValidationError(field, message)

    return AttendanceEntry(
        name=name,
        course=course,
        time_in=format_time_in(now),
        signature=generate_signature()
    )
