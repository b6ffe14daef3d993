import pytest

from resume_parsing.config import get_settings
from resume_parsing.locale_rules import BR_STATES, EN_US, PT_BR, SECTIONS, available_locales, get_locale_rules


def test_lookup_accepts_common_spellings():
    assert get_locale_rules("pt_BR") is PT_BR
    assert get_locale_rules("pt-BR") is PT_BR
    assert get_locale_rules("EN_us") is EN_US
    assert available_locales() == ["en_US", "pt_BR"]


def test_unknown_locale_raises_key_error():
    with pytest.raises(KeyError):
        get_locale_rules("fr_FR")


def test_headings_follow_fixed_section_order():
    for rules in (PT_BR, EN_US):
        assert tuple(section for section, _ in rules.headings) == SECTIONS


def test_brazilian_state_codes():
    assert len(BR_STATES) == 27
    assert PT_BR.location.search("Belo Horizonte/MG").group(0) == "Belo Horizonte/MG"
    assert PT_BR.location.search("Curitiba, XX") is None


def test_date_range_accepts_ongoing_and_numeric_forms():
    for text, start, end in [
        ("01/2019 a 12/2020", "01/2019", "12/2020"),
        ("2018 – 2019", "2018", "2019"),
        ("Setembro 2019 até hoje", None, "hoje"),
        ("fev 2021 - presente", "fev 2021", "presente"),
    ]:
        match = PT_BR.date_range.search(text)
        assert match is not None, text
        if start is not None:
            assert match.group(1) == start
        assert match.group(2) == end


def test_bare_year_only_matches_whole_line():
    assert PT_BR.bare_year.search("2020")
    assert PT_BR.bare_year.search("Formado em 2020") is None
    assert PT_BR.bare_year.search("1899") is None


def test_settings_read_environment(monkeypatch):
    monkeypatch.delenv("RESUME_PARSER_LOCALE", raising=False)
    monkeypatch.delenv("RESUME_PARSER_DEBUG", raising=False)
    assert get_settings() == {"locale": "pt_BR", "debug": False}

    monkeypatch.setenv("RESUME_PARSER_LOCALE", "en_US")
    monkeypatch.setenv("RESUME_PARSER_DEBUG", "yes")
    assert get_settings() == {"locale": "en_US", "debug": True}


def test_brazilian_location_ignores_case_but_us_location_does_not():
    assert PT_BR.location.search("Recife - pe").group(0) == "Recife - pe"
    assert EN_US.location.search("Engineer in Boston") is None
    assert EN_US.location.search("Boston, MA").group(0) == "Boston, MA"
