"""
Central data model definitions for the Classmere course catalog.

Course and Section are immutable records built once from an API document
(see classmere.parse). Display code only reads them.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class Section:
    """
    One offered instance of a course (a CRN) as returned by the Classmere API.

    Meeting fields come from the first entry of the API's "meetingTimes" list.
    Integer fields default to 0 when the API omits them or sends junk.
    """

    term: Optional[str] = None
    crn: int = 0
    instructor: Optional[str] = None

    # first meetingTimes entry
    building_code: Optional[str] = None
    days: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    room_number: Optional[str] = None

    type: Optional[str] = None
    status: Optional[str] = None
    fees: Optional[str] = None
    restrictions: Optional[str] = None
    capacity: int = 0
    current_enrollment: int = 0
    waitlist_current: int = 0


@dataclass(frozen=True, eq=False)
class Course:
    """
    Represents one catalog course, e.g. "CS 161".

    Identity is (subject_code, course_number) only: two courses with the same
    subject and number compare and hash equal whatever their title or sections.
    """

    subject_code: str
    course_number: int
    title: Optional[str] = None
    credits: Optional[str] = None
    description: Optional[str] = None
    abbr: Optional[str] = None
    sections: Tuple[Section, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "sections", tuple(self.sections))

    @classmethod
    def from_ids(cls, subject_code: str, course_number: int) -> Course:
        """
        Build a bare course from its identifying fields, e.g. as a lookup key.

        abbr stays None and sections stays empty.
        """
        return cls(subject_code=subject_code, course_number=course_number)

    @property
    def key(self) -> Tuple[str, int]:
        return (self.subject_code, self.course_number)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Course):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)
