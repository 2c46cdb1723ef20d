import re
from dataclasses import dataclass, astuple, fields
from typing import List

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass
class StudentRecord:
    student_id: str = ""
    first_name: str = ""
    last_name: str = ""
    lab1: str = ""
    lab2: str = ""
    lab3: str = ""
    prelim: str = ""
    attendance_grade: str = ""

    FIELD_COUNT = 8

    def __post_init__(self):
        # one record per line on disk
        for f in fields(self):
            value = getattr(self, f.name)
            setattr(self, f.name, _LINE_BREAK.sub(" ", str(value)))

    @classmethod
    def from_row(cls, row: List[str]) -> "StudentRecord":
        # short rows are padded, long rows truncated
        values = [str(v) for v in row][:cls.FIELD_COUNT]
        values += [""] * (cls.FIELD_COUNT - len(values))
        return cls(*values)

    def to_row(self) -> List[str]:
        return list(astuple(self))


@dataclass
class AttendanceEntry:
    name: str
    course: str
    time_in: str
    signature: str
