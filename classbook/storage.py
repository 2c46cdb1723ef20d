import csv
import logging
import os

from classbook.constants import COLUMNS
from classbook.exceptions import LoadFailure, SaveFailure
from classbook.models import StudentRecord

logger = logging.getLogger(__name__)

# undecodable bytes from legacy rosters are kept as-is on the next save
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"


def parse_line(line):
    # a stray quote never reaches past its own line
    if line.count('"') % 2:
        return line.split(",")
    try:
        return next(csv.reader([line], strict=True))
    except csv.Error:
        return line.split(",")


def load_records(filepath):
    records = []
    try:
        with open(filepath, "r", encoding=ENCODING, errors=ENCODING_ERRORS, newline="") as f:
            for line_no, line in enumerate(f, start=1):
                if line_no == 1:
                    continue  # header, never validated
                line = line.rstrip("\r\n")
                if not line:
                    continue
                row = parse_line(line)
                if len(row) != StudentRecord.FIELD_COUNT:
                    logger.warning(
                        "%s line %d has %d fields, expected %d",
                        filepath, line_no, len(row), StudentRecord.FIELD_COUNT
                    )
                records.append(StudentRecord.from_row(row))
    except OSError as e:
        raise LoadFailure(filepath, e) from e

    logger.info("Loaded %d records from %s", len(records), filepath)
    return records


def save_records(filepath, records):
    try:
        folder = os.path.dirname(filepath)
        if folder and not os.path.exists(folder):
            os.makedirs(folder)

        with open(filepath, "w", encoding=ENCODING, errors=ENCODING_ERRORS, newline="") as f:
            writer = csv.writer(f, lineterminator="\n")
            writer.writerow(COLUMNS)
            for record in records:
                writer.writerow(record.to_row())
    except OSError as e:
        raise SaveFailure(filepath, e) from e

    logger.info("Saved %d records to %s", len(records), filepath)
