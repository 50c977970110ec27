"""
Thin client for the Classmere REST API.

One HTTP request per call: no retries, caching or paging.
Reference docs: https://github.com/classmere/api
"""

from __future__ import annotations

import logging
from typing import Any, List
from urllib.parse import quote

import requests

from classmere.catalog import decode_courses
from classmere.model import Course
from classmere.parse import decode_course


# ---------------------------------------------------------------------------
# URLs
# ---------------------------------------------------------------------------

API_URL = "https://api.classmere.com"
DEFAULT_TIMEOUT = 30

logger = logging.getLogger(__name__)


def _get_json(url: str, timeout: float) -> Any:
    logger.debug("GET %s", url)
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    return resp.json()


def fetch_course(
    subject_code: str,
    course_number: int,
    base_url: str = API_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> Course:
    """
    Fetch and decode one course, e.g. fetch_course("CS", 161).

    Raises requests.HTTPError for error responses and MissingRequiredField
    if the API answers with an unusable course record.
    """
    url = f"{base_url.rstrip('/')}/courses/{quote(subject_code)}/{int(course_number)}"
    return decode_course(_get_json(url, timeout))


def search_courses(
    query: str,
    base_url: str = API_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> List[Course]:
    """
    Full-text course search. Malformed results are skipped (and logged).
    """
    url = f"{base_url.rstrip('/')}/search/courses/{quote(query.strip())}"
    data = _get_json(url, timeout)
    if not isinstance(data, list):
        logger.warning("Unexpected search response for %r: %r", query, data)
        return []
    return decode_courses(data)
