"""Locale-specific pattern tables for the offline résumé parser.

Everything that depends on language or country lives here: contact
shapes, state codes, month vocabularies, section keywords and the
placeholder literals written into unresolved fields. The parsing engine
only ever reads a ``LocaleRules`` object, so adding a locale means adding
one more table below.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Tuple


SECTIONS = ("experience", "education", "skills", "languages", "courses", "summary")


@dataclass(frozen=True)
class LocaleRules:
    name: str
    email: re.Pattern
    phone: re.Pattern
    profile: re.Pattern
    location: re.Pattern
    page_marker: re.Pattern
    date_range: re.Pattern
    bare_year: re.Pattern
    # (section, heading pattern) pairs, tested in order
    headings: Tuple[Tuple[str, re.Pattern], ...]
    name_stopwords: Tuple[str, ...]
    current_markers: Tuple[str, ...]
    name_placeholder: str
    position_placeholder: str
    institution_placeholder: str
    language_level_default: str


def _date_range_pattern(months: str, separators: str, ongoing: str) -> re.Pattern:
    token = rf"(?:{months}|\d{{1,2}})[/\s,.]*(?:\d{{4}}|\d{{2}})"
    return re.compile(
        rf"({token})\s*(?:{separators})\s*({token}|{ongoing})",
        re.IGNORECASE,
    )


def _headings(table: Dict[str, List[str]]) -> Tuple[Tuple[str, re.Pattern], ...]:
    return tuple(
        (section, re.compile(r"^(?:" + "|".join(table[section]) + r")", re.IGNORECASE))
        for section in SECTIONS
    )


_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_LINKEDIN_RE = re.compile(r"(?:www\.)?linkedin\.com/in/([\w\-]+)", re.IGNORECASE)
_BARE_YEAR_RE = re.compile(r"^(?:19|20)\d{2}$")


# ---- pt_BR ----

BR_STATES = (
    "AC", "AL", "AP", "AM", "BA", "CE", "DF", "ES", "GO", "MA", "MT", "MS", "MG", "PA",
    "PB", "PR", "PE", "PI", "RJ", "RN", "RS", "RO", "RR", "SC", "SP", "SE", "TO",
)

PT_BR = LocaleRules(
    name="pt_BR",
    email=_EMAIL_RE,
    # (11) 99999-9999, 11 999999999, +55 11 3333-4444
    phone=re.compile(r"(?:(?:\+|00)?(55)\s?)?(?:\(?([1-9][0-9])\)?\s?)?(?:((?:9\d|[2-9])\d{3})-?(\d{4}))"),
    profile=_LINKEDIN_RE,
    # case-insensitive so "Recife - pe" matches; header lines like "Python, Go" read as GO too
    location=re.compile(
        rf"([a-zA-ZÀ-ÿ\s]+)[\s,/-]+({'|'.join(BR_STATES)})\b",
        re.IGNORECASE,
    ),
    page_marker=re.compile(r"P[áa]gina \d+|Page \d+", re.IGNORECASE),
    date_range=_date_range_pattern(
        months=(
            "jan|fev|mar|abr|mai|jun|jul|ago|set|out|nov|dez|"
            "january|february|march|april|may|june|july|august|september|october|november|december"
        ),
        separators=r"-|–|a|to|at[ée]",
        ongoing="atual|presente|current|present|hoje|now",
    ),
    bare_year=_BARE_YEAR_RE,
    headings=_headings(
        {
            "experience": [
                r"experi[êe]ncia", "profission", r"hist[óo]rico", "work", "employment",
                "career", r"trajet[óo]ria",
            ],
            "education": [
                r"educa[çc][ãa]o", r"forma[çc][ãa]o", r"acad[êe]mic", "escolaridade",
                "education", "academic", "formation",
            ],
            "skills": [
                "habilidade", r"compet[êe]ncia", "skill", "conhecimento", "aptid", "tech",
                "ferramenta",
            ],
            "languages": ["idioma", "língua", "language"],
            "courses": ["curso", "certifica", "extens", "workshop"],
            "summary": [
                "resumo", "perfil", "sobre", "objetivo", "summary", "about", "profile",
                "objective",
            ],
        }
    ),
    name_stopwords=("Curriculum", "CV"),
    current_markers=("atual", "present"),
    name_placeholder="SEU NOME",
    position_placeholder="Cargo / Empresa",
    institution_placeholder="Instituição de Ensino",
    language_level_default="Intermediário",
)


# ---- en_US ----

US_STATES = (
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "DC", "FL", "GA", "HI", "ID", "IL",
    "IN", "IA", "KS", "KY", "LA", "ME", "MD", "MA", "MI", "MN", "MS", "MO", "MT", "NE",
    "NV", "NH", "NJ", "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC", "SD",
    "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
)

EN_US = LocaleRules(
    name="en_US",
    email=_EMAIL_RE,
    phone=re.compile(r"(?:\+?\d{1,3}[\s-]?)?(?:\(?\d{3}\)?[\s-]?)?\d{3}[\s-]?\d{4}"),
    profile=_LINKEDIN_RE,
    # state codes are matched upper-case only: "in", "or", "me" are common words
    location=re.compile(rf"([A-Za-z][A-Za-z\s.]*)[\s,/-]+({'|'.join(US_STATES)})\b"),
    page_marker=re.compile(r"Page \d+", re.IGNORECASE),
    date_range=_date_range_pattern(
        months=(
            "jan|feb|mar|apr|may|jun|jul|aug|sep|sept|oct|nov|dec|"
            "january|february|march|april|june|july|august|september|october|november|december"
        ),
        separators=r"-|–|—|to",
        ongoing="present|current|now|today",
    ),
    bare_year=_BARE_YEAR_RE,
    headings=_headings(
        {
            "experience": ["experience", "work", "employment", "professional", "career"],
            "education": ["education", "academic"],
            "skills": ["skill", "technical", "technolog", "tools", "competenc"],
            "languages": ["language"],
            "courses": ["course", "certifica", "training", "workshop"],
            "summary": ["summary", "about", "profile", "objective"],
        }
    ),
    name_stopwords=("Curriculum", "CV", "Resume", "Résumé"),
    current_markers=("present", "current", "now", "today"),
    name_placeholder="YOUR NAME",
    position_placeholder="Position / Company",
    institution_placeholder="Educational Institution",
    language_level_default="Intermediate",
)


_LOCALES: Dict[str, LocaleRules] = {rules.name: rules for rules in (PT_BR, EN_US)}
DEFAULT_LOCALE = PT_BR.name


def available_locales() -> List[str]:
    return sorted(_LOCALES)


def get_locale_rules(name: str) -> LocaleRules:
    """Return the rule table registered under ``name`` (``pt-BR`` and ``pt_br`` also work)."""
    key = (name or "").strip().replace("-", "_")
    for registered, rules in _LOCALES.items():
        if registered.lower() == key.lower():
            return rules
    raise KeyError(f"Unknown locale {name!r}; available: {', '.join(available_locales())}")


__all__ = [
    "DEFAULT_LOCALE",
    "EN_US",
    "LocaleRules",
    "PT_BR",
    "SECTIONS",
    "available_locales",
    "get_locale_rules",
]
