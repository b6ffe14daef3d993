import importlib.util
import json
from pathlib import Path

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "parse_resume.py"


def _load_cli():
    spec = importlib.util.spec_from_file_location("parse_resume_cli", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_cli_writes_parsed_json(tmp_path):
    source = tmp_path / "curriculo.txt"
    source.write_text("Maria Souza\nAnalista de Dados\nHabilidades\nPython, SQL\n", encoding="utf-8")
    output = tmp_path / "out" / "parsed.json"

    exit_code = _load_cli().main([str(source), "--locale", "pt_BR", "--merge", "--output", str(output)])

    assert exit_code == 0
    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["personalInfo"]["fullName"] == "MARIA SOUZA"
    assert [s["name"] for s in data["skills"]] == ["Python", "SQL"]
    assert "sectionOrder" in data


def test_cli_reports_missing_file(tmp_path, capsys):
    exit_code = _load_cli().main([str(tmp_path / "missing.pdf")])

    assert exit_code == 1
    assert "No such file" in capsys.readouterr().err
