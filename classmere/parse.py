"""
Parsing (API JSON -> Course / Section records).

Decoding rules:
- subjectCode (string) and courseNumber (integer) are required for a course;
  anything else raises MissingRequiredField
- optional string fields become None when missing or not a string
- integer section fields (crn, capacity, ...) become 0 when missing or junk
- only the FIRST meetingTimes entry of a section is used

Key names follow the upstream API exactly, including "waitlistcurrent".
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Any, List, Mapping, Optional

from classmere.model import Course, Section


class MissingRequiredField(ValueError):
    """
    Raised when a course record lacks subjectCode/courseNumber or has the
    wrong type for either.
    """

    def __init__(self, field: str, record: Any) -> None:
        super().__init__(f"course record is missing required field {field!r}")
        self.field = field
        self.record = record


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _opt_str(record: Mapping[str, Any], key: str) -> Optional[str]:
    value = record.get(key)
    return value if isinstance(value, str) else None


def _int_or_zero(record: Mapping[str, Any], key: str) -> int:
    """
    Read an integer field, coercing anything unusable to 0.

    Numbers are truncated, booleans map to 1/0 and numeric strings
    ("30", " 12.0 ") are parsed. Strings beyond 64-bit range give 0.
    """
    value = record.get(key)

    # bool is an int subclass, handle it first
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            return 0
        # anything past 64-bit range counts as junk
        if not number.is_finite() or number.adjusted() > 18:
            return 0
        return int(number)
    return 0


def _required_str(record: Mapping[str, Any], key: str, raw: Any) -> str:
    value = record.get(key)
    if not isinstance(value, str):
        raise MissingRequiredField(key, raw)
    return value


def _required_int(record: Mapping[str, Any], key: str, raw: Any) -> int:
    value = record.get(key)
    if isinstance(value, bool):
        raise MissingRequiredField(key, raw)
    if isinstance(value, int):
        return value
    # JSON producers sometimes send 161.0
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise MissingRequiredField(key, raw)


# ---------------------------------------------------------------------------
# Section parsing
# ---------------------------------------------------------------------------


def decode_section(record: Any) -> Section:
    """
    Decode one section record. Never raises: every field is optional.
    """
    data = _as_mapping(record)

    # Only the first meeting time is kept; later entries are dropped.
    meeting: Mapping[str, Any] = {}
    meeting_times = data.get("meetingTimes")
    if isinstance(meeting_times, list) and meeting_times:
        meeting = _as_mapping(meeting_times[0])

    return Section(
        term=_opt_str(data, "term"),
        crn=_int_or_zero(data, "crn"),
        instructor=_opt_str(data, "instructor"),
        building_code=_opt_str(meeting, "buildingCode"),
        days=_opt_str(meeting, "days"),
        start_time=_opt_str(meeting, "startTime"),
        end_time=_opt_str(meeting, "endTime"),
        room_number=_opt_str(meeting, "roomNumber"),
        type=_opt_str(data, "type"),
        status=_opt_str(data, "status"),
        fees=_opt_str(data, "fees"),
        restrictions=_opt_str(data, "restrictions"),
        capacity=_int_or_zero(data, "capacity"),
        current_enrollment=_int_or_zero(data, "currentEnrollment"),
        waitlist_current=_int_or_zero(data, "waitlistcurrent"),
    )


# ---------------------------------------------------------------------------
# Course parsing
# ---------------------------------------------------------------------------


def decode_course(record: Any) -> Course:
    """
    Decode one full course record, including its sections.

    Raises MissingRequiredField if subjectCode or courseNumber is missing
    or has the wrong type.
    """
    data = _as_mapping(record)

    subject_code = _required_str(data, "subjectCode", record)
    course_number = _required_int(data, "courseNumber", record)

    sections: List[Section] = []
    section_records = data.get("sections")
    if isinstance(section_records, list):
        for section_record in section_records:
            sections.append(decode_section(section_record))

    return Course(
        subject_code=subject_code,
        course_number=course_number,
        title=_opt_str(data, "title"),
        credits=_opt_str(data, "credits"),
        description=_opt_str(data, "description"),
        abbr=f"{subject_code} {course_number}",
        sections=tuple(sections),
    )
