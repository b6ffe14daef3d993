import json
from pathlib import Path

import resume_parsing.parser as parser_module


parse_resume_locally = parser_module.parse_resume_locally


FIXTURE_PATH = Path(__file__).resolve().parent / "fixtures" / "resume_samples.json"


def test_resume_regressions():
    samples = json.loads(FIXTURE_PATH.read_text(encoding="utf-8"))
    for sample in samples:
        expected = sample["expected"]

        result = parse_resume_locally(sample["text"], locale=sample["locale"])

        info = result["personalInfo"]
        for key in ("fullName", "jobTitle", "email", "phone", "location"):
            if key in expected:
                assert info[key] == expected[key], (key, sample["text"][:30])

        if "summary" in expected:
            assert result["summary"] == expected["summary"]

        assert [e["position"] for e in result["experiences"]] == expected["positions"]
        assert sum(1 for e in result["experiences"] if e["current"]) == expected["current_count"]
        assert [s["name"] for s in result["skills"]] == expected["skills"]
        for language in expected.get("languages", []):
            assert any(language == entry["name"] for entry in result["languages"])
