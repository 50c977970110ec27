"""
Unit tests for course decoding.

Decoding contract:
- subjectCode (string) + courseNumber (integer) are required
- abbr = "<subjectCode> <courseNumber>"
- sections keep document order
"""

import unittest

from classmere.model import Course, Section
from classmere.parse import MissingRequiredField, decode_course


CS161 = {
    "subjectCode": "CS",
    "courseNumber": 161,
    "sections": [
        {
            "term": "Fall 2024",
            "crn": 12345,
            "meetingTimes": [
                {
                    "buildingCode": "KEC",
                    "days": "MWF",
                    "startTime": "10:00",
                    "endTime": "10:50",
                    "roomNumber": "1001",
                }
            ],
            "capacity": 30,
            "currentEnrollment": 28,
        }
    ],
}


class TestDecodeCourse(unittest.TestCase):
    def test_full_scenario(self) -> None:
        course = decode_course(CS161)

        self.assertEqual(course.subject_code, "CS")
        self.assertEqual(course.course_number, 161)
        self.assertEqual(course.abbr, "CS 161")
        self.assertIsNone(course.title)
        self.assertIsNone(course.credits)
        self.assertIsNone(course.description)

        self.assertEqual(
            course.sections,
            (
                Section(
                    term="Fall 2024",
                    crn=12345,
                    building_code="KEC",
                    days="MWF",
                    start_time="10:00",
                    end_time="10:50",
                    room_number="1001",
                    capacity=30,
                    current_enrollment=28,
                    waitlist_current=0,
                ),
            ),
        )

    def test_optional_fields(self) -> None:
        course = decode_course(
            {
                "subjectCode": "MTH",
                "courseNumber": 251,
                "title": "Differential Calculus",
                "credits": "4",
                "description": "Limits and derivatives.",
            }
        )
        self.assertEqual(course.title, "Differential Calculus")
        self.assertEqual(course.credits, "4")
        self.assertEqual(course.description, "Limits and derivatives.")
        self.assertEqual(course.abbr, "MTH 251")
        self.assertEqual(course.sections, ())

    def test_optional_fields_with_wrong_type_are_none(self) -> None:
        course = decode_course({"subjectCode": "MTH", "courseNumber": 251, "title": 5, "credits": 4})
        self.assertIsNone(course.title)
        self.assertIsNone(course.credits)

    def test_abbr_for_several_records(self) -> None:
        for subject, number in [("CS", 161), ("PH", 211), ("WR", 121), ("ECE", 1)]:
            course = decode_course({"subjectCode": subject, "courseNumber": number})
            self.assertEqual(course.abbr, subject + " " + str(number))

    def test_integral_float_course_number_is_accepted(self) -> None:
        course = decode_course({"subjectCode": "CS", "courseNumber": 161.0})
        self.assertEqual(course.course_number, 161)
        self.assertEqual(course.abbr, "CS 161")

    def test_sections_keep_document_order(self) -> None:
        record = {
            "subjectCode": "CS",
            "courseNumber": 261,
            "sections": [{"crn": n} for n in (30003, 10001, 20002)],
        }
        course = decode_course(record)
        self.assertEqual(len(course.sections), 3)
        self.assertEqual([s.crn for s in course.sections], [30003, 10001, 20002])

    def test_sections_not_a_list_means_no_sections(self) -> None:
        course = decode_course({"subjectCode": "CS", "courseNumber": 261, "sections": {"crn": 1}})
        self.assertEqual(course.sections, ())


class TestMissingRequiredField(unittest.TestCase):
    def test_missing_subject_code(self) -> None:
        with self.assertRaises(MissingRequiredField) as ctx:
            decode_course({"courseNumber": 161})
        self.assertEqual(ctx.exception.field, "subjectCode")

    def test_missing_course_number(self) -> None:
        record = {"subjectCode": "CS", "title": "Intro"}
        with self.assertRaises(MissingRequiredField) as ctx:
            decode_course(record)
        self.assertEqual(ctx.exception.field, "courseNumber")
        self.assertIs(ctx.exception.record, record)

    def test_wrong_types(self) -> None:
        bad_records = [
            {"subjectCode": 42, "courseNumber": 161},
            {"subjectCode": None, "courseNumber": 161},
            {"subjectCode": "CS", "courseNumber": "161"},
            {"subjectCode": "CS", "courseNumber": 161.5},
            {"subjectCode": "CS", "courseNumber": True},
        ]
        for record in bad_records:
            with self.subTest(record=record):
                with self.assertRaises(MissingRequiredField):
                    decode_course(record)

    def test_non_object_record(self) -> None:
        for record in (None, [], "CS 161", 161):
            with self.subTest(record=record):
                with self.assertRaises(MissingRequiredField):
                    decode_course(record)

    def test_is_a_value_error(self) -> None:
        with self.assertRaises(ValueError):
            decode_course({})


class TestCourseFromIds(unittest.TestCase):
    def test_bare_course(self) -> None:
        course = Course.from_ids("CS", 161)
        self.assertEqual(course.subject_code, "CS")
        self.assertEqual(course.course_number, 161)
        self.assertIsNone(course.abbr)
        self.assertIsNone(course.title)
        self.assertIsNone(course.credits)
        self.assertIsNone(course.description)
        self.assertEqual(course.sections, ())


if __name__ == "__main__":
    unittest.main()
