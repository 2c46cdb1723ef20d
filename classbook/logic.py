import logging

from classbook.constants import RECORDS_FILE
from classbook.exceptions import LoadFailure, SaveFailure
from classbook.models import StudentRecord
from classbook.storage import load_records, save_records

logger = logging.getLogger(__name__)


def _log_only(title, message):
    logger.error("%s: %s", title, message)


class RecordStore:
    """Ordered student records mirrored to a CSV file.

    Every mutation is followed by a full rewrite of the file. Load and save
    failures are reported through ``notify(title, message)`` and never raised
    to the caller; a failed save keeps the in-memory change.
    """

    def __init__(self, filepath=RECORDS_FILE, notify=None):
        self.filepath = filepath
        self.notify = notify or _log_only
        self._records = []

    @property
    def records(self):
        return tuple(self._records)

    def __len__(self):
        return len(self._records)

    # ==================================================
    # load / save
    # ==================================================

    def load(self):
        try:
            self._records = load_records(self.filepath)
        except LoadFailure as e:
            logger.error("%s", e)
            self._records = []
            self.notify("Error", "Error loading CSV file.")
        return self.records

    def save(self):
        try:
            save_records(self.filepath, self._records)
            return True
        except SaveFailure as e:
            logger.error("%s", e)
            self.notify("Error", "Error saving CSV file.")
            return False

    # ==================================================
    # mutations
    # ==================================================

    def append(self, record: StudentRecord):
        self._records.append(record)
        return self.save()

    def remove_at(self, index):
        if index is None:
            return False

        if not 0 <= index < len(self._records):
            logger.warning(
                "Ignoring delete at index %s, store holds %d records",
                index, len(self._records)
            )
            return False

        removed = self._records.pop(index)
        logger.debug("Removed record %r", removed.student_id)
        return self.save()

    def add(self, student_id, first_name, last_name, lab1, lab2, lab3, prelim, attendance_grade):
        record = StudentRecord(
            student_id=student_id,
            first_name=first_name,
            last_name=last_name,
            lab1=lab1,
            lab2=lab2,
            lab3=lab3,
            prelim=prelim,
            attendance_grade=attendance_grade
        )
        return self.append(record)

    def remove_selected(self, index=None):
        return self.remove_at(index)
