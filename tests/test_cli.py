"""Tests for the fulcrum command line."""

from __future__ import annotations

import json
from pathlib import Path

from fulcrum.cli import main

from samples import BUGFIX_TEXT, WEBSITE_TEXT


def test_no_command_prints_help(capsys) -> None:
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_analyze_text_json(capsys) -> None:
    assert main(["analyze", "--text", BUGFIX_TEXT]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["classification"]["primary_type"] == "problem_solving"
    assert data["task_graph"]["total_tasks"] == 4


def test_analyze_text_markdown(capsys) -> None:
    assert main(["analyze", "--text", WEBSITE_TEXT, "--format", "markdown"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("# Prompt Report: ")
    assert "- Type: General Purpose" in out


def test_analyze_request_file(tmp_path: Path, capsys) -> None:
    path = tmp_path / "request.json"
    path.write_text(json.dumps({"text": WEBSITE_TEXT, "tokens": {"word_count": 10}}), encoding="utf-8")
    assert main(["analyze", str(path), "--profile", "legacy"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["prompt_grade"]["profile"] == "legacy"


def test_analyze_raw_file(tmp_path: Path, capsys) -> None:
    path = tmp_path / "prompt.txt"
    path.write_text(BUGFIX_TEXT, encoding="utf-8")
    assert main(["analyze", str(path), "--raw"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["idea_analysis"]["unique_ideas"] == 4


def test_analyze_missing_file(tmp_path: Path, capsys) -> None:
    assert main(["analyze", str(tmp_path / "absent.json")]) == 1
    assert "Error: Input file not found" in capsys.readouterr().err


def test_analyze_bad_json(tmp_path: Path, capsys) -> None:
    path = tmp_path / "request.json"
    path.write_text("{not json", encoding="utf-8")
    assert main(["analyze", str(path)]) == 1
    assert "not valid JSON" in capsys.readouterr().err


def test_analyze_bad_config(tmp_path: Path, capsys) -> None:
    config = tmp_path / "config.toml"
    config.write_text("[limits]\nmax_tasks = 0\n", encoding="utf-8")
    assert main(["analyze", "--text", "hi", "--config", str(config)]) == 1
    assert capsys.readouterr().err.startswith("Error: ")


def test_classify(capsys) -> None:
    assert main(["classify", BUGFIX_TEXT]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["primary_type"] == "problem_solving"
    assert data["display_name"] == "Problem Solving"


def test_batch_keeps_order(tmp_path: Path, capsys) -> None:
    path = tmp_path / "requests.jsonl"
    lines = [json.dumps({"text": WEBSITE_TEXT}), "", json.dumps({"text": BUGFIX_TEXT})]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    assert main(["batch", str(path), "--workers", "2"]) == 0
    out = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert [d["classification"]["primary_type"] for d in out] == ["general", "problem_solving"]


def test_batch_reports_bad_line(tmp_path: Path, capsys) -> None:
    path = tmp_path / "requests.jsonl"
    path.write_text(json.dumps({"text": "ok"}) + "\n" + json.dumps({"txt": "bad"}) + "\n", encoding="utf-8")
    assert main(["batch", str(path)]) == 1
    assert "line 2" in capsys.readouterr().err


def test_non_numeric_config_value(tmp_path: Path, capsys) -> None:
    config = tmp_path / "config.toml"
    config.write_text('workers = "two"\n', encoding="utf-8")
    assert main(["classify", "hi", "--config", str(config)]) == 1
    assert "workers must be a number" in capsys.readouterr().err
