"""
Tests for the console entry point.
"""

import json

import main
from brain import parse_notes_text


def test_format_result_lists_every_field(sample_notes):
    text = main.format_result(parse_notes_text(sample_notes))

    assert "Brightside Health" in text
    assert "12 weeks" in text
    assert "logo, branding, website, print" in text
    assert "$25000" in text


def test_format_result_without_budget():
    text = main.format_result(parse_notes_text(""))
    assert "Budget   : (not found)" in text


def test_file_mode_prints_json(tmp_path, capsys, sample_notes):
    notes_file = tmp_path / "notes.txt"
    notes_file.write_text(sample_notes, encoding="utf-8")

    assert main.main([str(notes_file)]) == 0

    line = capsys.readouterr().out.strip()
    record = json.loads(line)
    assert record["file"] == str(notes_file)
    assert record["data"]["clientBudget"] == "25000"


def test_file_mode_missing_file(tmp_path, capsys):
    assert main.main([str(tmp_path / "missing.txt")]) == 1
    assert "[ERROR]" in capsys.readouterr().err


def test_interactive_mode(monkeypatch, capsys):
    inputs = iter(["Client: Acme Corp", "needs a logo", "", "exit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(inputs))

    assert main.main([]) == 0

    out = capsys.readouterr().out
    assert "Acme Corp" in out
    assert "Logo Design" in out
