"""
Classmere course catalog data model.
"""

from classmere.model import Course, Section
from classmere.parse import MissingRequiredField, decode_course, decode_section

__all__ = ["Course", "Section", "MissingRequiredField", "decode_course", "decode_section"]
