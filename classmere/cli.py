"""
CLI (Command Line Interface).

Quick terminal commands for looking at catalog data, e.g.:

    classmere show <courses.json>
    classmere fetch CS 161
    classmere search <text>

Note:
- Output is plain text (no rich formatting)
- Malformed course records are skipped with a warning on stderr
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Iterable

import requests

from classmere.api import API_URL, fetch_course, search_courses
from classmere.catalog import load_courses
from classmere.model import Course, Section


def _text(value: object, default: str = "-") -> str:
    return default if value is None else str(value)


def _format_section(section: Section) -> str:
    """
    One line per section: term, CRN, type, meeting, room, instructor, seats.
    """
    if section.days or section.start_time:
        meeting = f"{_text(section.days, '')} {_text(section.start_time, '')}-{_text(section.end_time, '')}".strip()
    else:
        meeting = "TBA"
    room = f"{_text(section.building_code, '')} {_text(section.room_number, '')}".strip() or "-"
    seats = f"{section.current_enrollment}/{section.capacity}"
    if section.waitlist_current:
        seats += f" (+{section.waitlist_current} waitlist)"
    return (
        f"  {_text(section.term)} | CRN {section.crn} | {_text(section.type)} | {meeting} | "
        f"{room} | {_text(section.instructor)} | {seats}"
    )


def _print_courses(courses: Iterable[Course]) -> int:
    count = 0
    for course in courses:
        label = course.abbr or f"{course.subject_code} {course.course_number}"
        title = course.title if course.title else "(no title)"
        header = f"{label} | {title}"
        if course.credits:
            header += f" | {course.credits} credits"
        print(header)
        for section in course.sections:
            print(_format_section(section))
        count += 1
    if not count:
        print("No courses.")
    return count


def _cmd_show(args: argparse.Namespace) -> int:
    """
    Decode courses from a local JSON file and print them.
    """
    try:
        courses = load_courses(args.path)
    except FileNotFoundError:
        print(f"File not found: {args.path}")
        return 1
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        print(f"Could not read {args.path}: {exc}")
        return 1

    _print_courses(courses)
    return 0


def _cmd_fetch(args: argparse.Namespace) -> int:
    """
    Fetch one course from the API and print it.
    """
    subject = args.subject or ""
    if not subject.strip():
        print("Please provide a subject code.")
        return 1

    try:
        course = fetch_course(subject, args.number, base_url=args.api_url)
    except requests.RequestException as exc:
        print(f"Request failed: {exc}")
        return 1
    except ValueError as exc:
        print(f"Bad course data from API: {exc}")
        return 1

    _print_courses([course])
    return 0


def _cmd_search(args: argparse.Namespace) -> int:
    """
    Search the API and print matching courses.
    """
    query = (args.text or "").strip()
    if not query:
        print("Please provide a search text.")
        return 1

    try:
        courses = search_courses(query, base_url=args.api_url)
    except requests.RequestException as exc:
        print(f"Request failed: {exc}")
        return 1
    except ValueError as exc:
        print(f"Bad response from API: {exc}")
        return 1

    _print_courses(courses)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="classmere", description="Classmere course catalog CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_show = sub.add_parser("show", help="Print courses from a JSON file")
    p_show.add_argument("path", type=str, help="JSON file with a course object or a list of them")

    p_fetch = sub.add_parser("fetch", help="Fetch one course from the API")
    p_fetch.add_argument("subject", type=str, help="Subject code (e.g. CS), sent as given")
    p_fetch.add_argument("number", type=int, help="Course number (e.g. 161)")
    p_fetch.add_argument("--api-url", type=str, default=API_URL, help="API base URL")

    p_search = sub.add_parser("search", help="Search courses via the API")
    p_search.add_argument("text", type=str, help="Search text")
    p_search.add_argument("--api-url", type=str, default=API_URL, help="API base URL")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "show":
        raise SystemExit(_cmd_show(args))
    if args.command == "fetch":
        raise SystemExit(_cmd_fetch(args))
    if args.command == "search":
        raise SystemExit(_cmd_search(args))

    raise SystemExit(2)
