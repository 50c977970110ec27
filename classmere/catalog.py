"""
Catalog helpers on top of classmere.parse.

A malformed course record (missing subjectCode/courseNumber) is skipped and
logged instead of aborting the whole batch.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Optional

from classmere.model import Course
from classmere.parse import MissingRequiredField, decode_course

logger = logging.getLogger(__name__)


def decode_courses(records: Iterable[Any]) -> List[Course]:
    """
    Decode course records in order, skipping the ones that are malformed.
    """
    courses: List[Course] = []
    for index, record in enumerate(records):
        try:
            courses.append(decode_course(record))
        except MissingRequiredField as exc:
            logger.warning("Skipping course record #%d (%s): %r", index, exc, exc.record)
    logger.debug("Decoded %d course(s)", len(courses))
    return courses


def load_courses(path: str | Path) -> List[Course]:
    """
    Load courses from a JSON file holding one course object or a list of them.

    OSError and json.JSONDecodeError propagate to the caller.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(data, list):
        return decode_courses(data)
    return decode_courses([data])


def find_course(courses: Iterable[Course], subject_code: str, course_number: int) -> Optional[Course]:
    """
    Return the course matching subject/number, or None.
    """
    wanted = Course.from_ids(subject_code, course_number)
    for course in courses:
        if course == wanted:
            return course
    return None
