# parser.py
# --- Offline résumé parsing: plain text in, editable résumé record out ---

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from resume_parsing.config import get_settings
from resume_parsing.locale_rules import LocaleRules, get_locale_rules
from services.resume_schema import (
    DEFAULT_LANGUAGE_PERCENTAGE,
    DEFAULT_SKILL_LEVEL,
    build_course_entry,
    build_education_entry,
    build_experience_entry,
    build_language_entry,
    build_parsed_resume,
    build_skill_entry,
)

logger = logging.getLogger(__name__)


# ---- Debug utilities ----

_DEBUG = False


def set_debug(enabled: bool) -> None:
    """Toggle step-by-step debug output for this module."""
    global _DEBUG
    _DEBUG = enabled
    logger.setLevel(logging.DEBUG if enabled else logging.NOTSET)


def _debug(step: str, detail: Optional[str] = None) -> None:
    if not _DEBUG:
        return
    if detail:
        logger.debug("[parser] %s: %s", step, detail)
    else:
        logger.debug("[parser] %s", step)


set_debug(get_settings()["debug"])


# ---- Tunables ----

HEADER_SCAN_LINES = 20
NAME_SCAN_LINES = 10
HEADING_MAX_LEN = 40
SUMMARY_SEED_MIN_LEN = 100
SHORT_LINE_LEN = 50
SKILL_MAX_LEN = 40

_BULLET_RE = re.compile(r"^[\s•\-*·>]+")
_SKILL_SPLIT_RE = re.compile(r"[,;|•·\t]| {2,}")
_LANGUAGE_SPLIT_RE = re.compile(r"[-–:]")

LocaleArg = Union[str, LocaleRules, None]


def _resolve_rules(locale: LocaleArg) -> LocaleRules:
    if isinstance(locale, LocaleRules):
        return locale
    return get_locale_rules(locale or get_settings()["locale"])


# ---- Line helpers ----

def clean_bullet(text: str) -> str:
    return _BULLET_RE.sub("", text or "").strip()


def normalize_lines(text: Optional[str], rules: LocaleRules) -> List[str]:
    """Trimmed content lines, minus one-character noise and page markers."""
    lines: List[str] = []
    for raw in (text or "").splitlines():
        line = raw.strip()
        if len(line) <= 1 or rules.page_marker.search(line):
            continue
        lines.append(line)
    _debug("normalize_lines", f"kept {len(lines)} lines")
    return lines


def find_date_range(line: str, rules: LocaleRules) -> Optional[re.Match]:
    return rules.date_range.search(line)


def _without_first(pattern: re.Pattern, line: str) -> str:
    return pattern.sub("", line, count=1).strip()


# ---- Header extraction ----

def _is_contact_line(line: str, rules: LocaleRules) -> bool:
    return bool(
        rules.email.search(line)
        or rules.phone.search(line)
        or rules.profile.search(line)
    )


def extract_contact(lines: List[str], rules: LocaleRules) -> Dict[str, str]:
    """First match per field within the top of the document; lines may feed several fields."""
    patterns = {
        "email": rules.email,
        "phone": rules.phone,
        "linkedin": rules.profile,
        "location": rules.location,
    }
    found = {key: "" for key in patterns}
    for line in lines[:HEADER_SCAN_LINES]:
        for key, pattern in patterns.items():
            if found[key]:
                continue
            match = pattern.search(line)
            if match:
                found[key] = match.group(0).strip()
    _debug("extract_contact", ", ".join(f"{k}={v!r}" for k, v in found.items() if v) or "no match")
    return found


def extract_name_and_title(lines: List[str], rules: LocaleRules) -> Tuple[str, str, int]:
    """Return (full name, job title, index where section scanning starts).

    The name is the first short non-contact line near the top; the line
    right after it becomes the title when it is short and not a contact.
    """
    for idx, line in enumerate(lines[:NAME_SCAN_LINES]):
        if _is_contact_line(line, rules):
            continue
        if not 3 < len(line) < SHORT_LINE_LEN:
            continue
        if any(word in line for word in rules.name_stopwords):
            continue

        name = clean_bullet(line).upper()
        next_line = lines[idx + 1] if idx + 1 < len(lines) else ""
        if next_line and not _is_contact_line(next_line, rules) and len(next_line) < SHORT_LINE_LEN:
            title = clean_bullet(next_line)
            _debug("extract_name_and_title", f"name={name!r} title={title!r}")
            return name, title, idx + 2
        _debug("extract_name_and_title", f"name={name!r} without title")
        return name, "", idx + 1

    _debug("extract_name_and_title", "no match")
    return "", "", 0


# ---- Section classification ----

def classify_heading(line: str, rules: LocaleRules) -> Optional[str]:
    if len(line) >= HEADING_MAX_LEN:
        return None
    for section, pattern in rules.headings:
        if pattern.match(line):
            return section
    return None


@dataclass
class _ParseState:
    rules: LocaleRules
    resume: Dict[str, Any]
    section: Optional[str] = None


# ---- Per-section handlers ----

def _handle_unsectioned(state: _ParseState, line: str) -> None:
    # a long paragraph before any heading is treated as the summary
    if len(line) > SUMMARY_SEED_MIN_LEN and not state.resume["summary"]:
        state.section = "summary"
        state.resume["summary"] += line + " "


def _handle_summary(state: _ParseState, line: str) -> None:
    if find_date_range(line, state.rules):
        return
    state.resume["summary"] += line + " "


def _is_ongoing(end_token: str, rules: LocaleRules) -> bool:
    lowered = end_token.lower()
    return any(marker in lowered for marker in rules.current_markers)


def _handle_experience(state: _ParseState, line: str) -> None:
    rules = state.rules
    entries: List[Dict[str, Any]] = state.resume["experiences"]
    match = find_date_range(line, rules)

    if match:
        start, end = (match.group(1) or "").strip(), (match.group(2) or "").strip()
        position = clean_bullet(_without_first(rules.date_range, line))
        entries.append(
            build_experience_entry(
                position=position or rules.position_placeholder,
                start_date=start,
                end_date=end,
                current=_is_ongoing(end, rules),
            )
        )
        return

    if entries:
        last = entries[-1]
        if len(line) < SHORT_LINE_LEN and not last["company"] and not last["description"]:
            last["company"] = clean_bullet(line)
        else:
            detail = clean_bullet(line)
            last["description"] = f"{last['description']}\n{detail}" if last["description"] else detail
        return

    # text ahead of the first dated line opens a provisional entry
    if len(line) > 3:
        entries.append(build_experience_entry(position=clean_bullet(line)))


def _handle_education(state: _ParseState, line: str) -> None:
    rules = state.rules
    entries: List[Dict[str, str]] = state.resume["education"]
    range_match = find_date_range(line, rules)
    year_match = None if range_match else rules.bare_year.search(line)

    if range_match or year_match:
        start = end = ""
        if range_match:
            start, end = (range_match.group(1) or "").strip(), (range_match.group(2) or "").strip()
        else:
            end = year_match.group(0)
        remainder = _without_first(rules.bare_year, _without_first(rules.date_range, line))
        entries.append(
            build_education_entry(
                institution=clean_bullet(remainder) or rules.institution_placeholder,
                start_date=start,
                end_date=end,
            )
        )
        return

    if entries:
        last = entries[-1]
        if not last["degree"]:
            last["degree"] = clean_bullet(line)
        elif not last["field"]:
            last["field"] = clean_bullet(line)
        return

    if len(line) > 4:
        entries.append(build_education_entry(institution=clean_bullet(line)))


def _handle_skills(state: _ParseState, line: str) -> None:
    for item in _SKILL_SPLIT_RE.split(line):
        name = clean_bullet(item)
        if 1 < len(name) < SKILL_MAX_LEN:
            state.resume["skills"].append(build_skill_entry(name, DEFAULT_SKILL_LEVEL))


def _handle_languages(state: _ParseState, line: str) -> None:
    # leading "- " bullets would otherwise be read as the name/level separator
    parts = _LANGUAGE_SPLIT_RE.split(clean_bullet(line))
    name = clean_bullet(parts[0])
    level = parts[1].strip() if len(parts) > 1 else ""
    state.resume["languages"].append(
        build_language_entry(
            name,
            level or state.rules.language_level_default,
            DEFAULT_LANGUAGE_PERCENTAGE,
        )
    )


def _handle_courses(state: _ParseState, line: str) -> None:
    state.resume["courses"].append(build_course_entry(clean_bullet(line)))


_SECTION_HANDLERS: Dict[str, Callable[[_ParseState, str], None]] = {
    "summary": _handle_summary,
    "experience": _handle_experience,
    "education": _handle_education,
    "skills": _handle_skills,
    "languages": _handle_languages,
    "courses": _handle_courses,
}


def _finalize(resume: Dict[str, Any], rules: LocaleRules) -> Dict[str, Any]:
    resume["summary"] = resume["summary"].strip()
    if not resume["personalInfo"]["fullName"]:
        resume["personalInfo"]["fullName"] = rules.name_placeholder
    return resume


# ---- Master parse ----

def parse_resume_locally(text: Optional[str], locale: LocaleArg = None) -> Dict[str, Any]:
    """Turn extracted résumé text into a draft record using layout and keyword cues only.

    The result always carries every top-level key; anything the
    heuristics cannot place is left at its default for the user to edit.
    """
    rules = _resolve_rules(locale)
    _debug("parse", f"start locale={rules.name}")
    resume = build_parsed_resume()

    lines = normalize_lines(text, rules)
    if not lines:
        _debug("parse", "empty input")
        return _finalize(resume, rules)

    resume["personalInfo"].update(extract_contact(lines, rules))
    name, title, start = extract_name_and_title(lines, rules)
    resume["personalInfo"]["fullName"] = name
    resume["personalInfo"]["jobTitle"] = title

    state = _ParseState(rules=rules, resume=resume)
    for line in lines[start:]:
        section = classify_heading(line, rules)
        if section:
            _debug("section", f"{section} <- {line!r}")
            state.section = section
            continue
        if state.section is None:
            _handle_unsectioned(state, line)
        else:
            _SECTION_HANDLERS[state.section](state, line)

    _debug(
        "parse",
        "complete: "
        + ", ".join(f"{key}={len(resume[key])}" for key in ("experiences", "education", "skills", "languages", "courses")),
    )
    return _finalize(resume, rules)


__all__ = [
    "classify_heading",
    "clean_bullet",
    "extract_contact",
    "extract_name_and_title",
    "find_date_range",
    "normalize_lines",
    "parse_resume_locally",
    "set_debug",
]
