"""Shared helpers for constructing résumé records in the editor's shape."""

from __future__ import annotations

import copy
import uuid
from typing import Any, Dict, List, Optional


SKILL_LEVELS = ("Beginner", "Intermediate", "Advanced", "Expert")
DEFAULT_SKILL_LEVEL = "Intermediate"
DEFAULT_LANGUAGE_PERCENTAGE = 60
DEFAULT_SECTION_ORDER = ["summary", "experience", "education", "skills", "extras"]

PERSONAL_INFO_FIELDS = ("fullName", "email", "phone", "location", "linkedin", "jobTitle")
# fields the editor carries that the text parser never fills
EDITOR_ONLY_FIELDS = ("website", "drivingLicense", "photoUrl")


def _coerce_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return str(value).strip()


def new_entry_id() -> str:
    """Short random token; only needs to be unique within one résumé."""
    return uuid.uuid4().hex[:9]


def build_experience_entry(
    *,
    position: str = "",
    company: str = "",
    start_date: str = "",
    end_date: str = "",
    current: bool = False,
    description: str = "",
    location: str = "",
) -> Dict[str, Any]:
    return {
        "id": new_entry_id(),
        "position": _coerce_text(position),
        "company": _coerce_text(company),
        "startDate": _coerce_text(start_date),
        "endDate": _coerce_text(end_date),
        "current": bool(current),
        "description": _coerce_text(description),
        "location": _coerce_text(location),
    }


def build_education_entry(
    *,
    institution: str = "",
    degree: str = "",
    field: str = "",
    start_date: str = "",
    end_date: str = "",
    location: str = "",
) -> Dict[str, str]:
    return {
        "id": new_entry_id(),
        "institution": _coerce_text(institution),
        "degree": _coerce_text(degree),
        "field": _coerce_text(field),
        "startDate": _coerce_text(start_date),
        "endDate": _coerce_text(end_date),
        "location": _coerce_text(location),
    }


def build_skill_entry(name: str, level: str = DEFAULT_SKILL_LEVEL) -> Dict[str, str]:
    if level not in SKILL_LEVELS:
        level = DEFAULT_SKILL_LEVEL
    return {"id": new_entry_id(), "name": _coerce_text(name), "level": level}


def build_language_entry(
    name: str,
    level: str = "",
    percentage: int = DEFAULT_LANGUAGE_PERCENTAGE,
) -> Dict[str, Any]:
    try:
        pct = int(percentage)
    except (TypeError, ValueError):
        pct = DEFAULT_LANGUAGE_PERCENTAGE
    return {
        "id": new_entry_id(),
        "name": _coerce_text(name),
        "level": _coerce_text(level),
        "percentage": max(0, min(100, pct)),
    }


def build_course_entry(name: str, institution: str = "", year: str = "") -> Dict[str, str]:
    return {
        "id": new_entry_id(),
        "name": _coerce_text(name),
        "institution": _coerce_text(institution),
        "year": _coerce_text(year),
    }


def build_parsed_resume() -> Dict[str, Any]:
    """Return the all-default record produced by a parse."""

    return {
        "personalInfo": {key: "" for key in PERSONAL_INFO_FIELDS},
        "summary": "",
        "experiences": [],
        "education": [],
        "skills": [],
        "languages": [],
        "courses": [],
    }


def blank_resume() -> Dict[str, Any]:
    """Return the empty editable document a parse result is merged over."""

    record = build_parsed_resume()
    for key in EDITOR_ONLY_FIELDS:
        record["personalInfo"][key] = ""
    record["sectionOrder"] = list(DEFAULT_SECTION_ORDER)
    return record


def merge_parsed_resume(
    parsed: Dict[str, Any],
    base: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Shallow-merge a parse result over ``base`` (a blank résumé by default).

    Top-level keys present in ``parsed`` replace the template's value
    wholesale, nested dicts included; template keys the parse lacks are
    kept. Neither argument is mutated.
    """

    merged = copy.deepcopy(base) if base is not None else blank_resume()
    for key, value in (parsed or {}).items():
        merged[key] = copy.deepcopy(value)
    return merged


def entry_ids(record: Dict[str, Any]) -> List[str]:
    ids: List[str] = []
    for key in ("experiences", "education", "skills", "languages", "courses"):
        ids.extend(entry["id"] for entry in record.get(key, []) if isinstance(entry, dict))
    return ids


__all__ = [
    "DEFAULT_LANGUAGE_PERCENTAGE",
    "DEFAULT_SECTION_ORDER",
    "DEFAULT_SKILL_LEVEL",
    "SKILL_LEVELS",
    "blank_resume",
    "build_course_entry",
    "build_education_entry",
    "build_experience_entry",
    "build_language_entry",
    "build_parsed_resume",
    "build_skill_entry",
    "entry_ids",
    "merge_parsed_resume",
    "new_entry_id",
]
