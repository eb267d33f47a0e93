import json
from pathlib import Path

from typer.testing import CliRunner

from scripts.typeforge_cli import app
from typeforge.quiz_questions import questions_for, realm_questions_for

runner = CliRunner()


def test_cli_generate_text():
    result = runner.invoke(
        app,
        ["generate", "--ap", "VELF", "--enneagram", "5w4", "--instinct", "sp", "--mbti", "INTJ", "--seed", "3"],
    )
    assert result.exit_code == 0, result.output
    assert "Class: Expressive Sage (sp)" in result.output
    assert "[hero] Foresight (Ni, power 20)" in result.output
    assert "INSIGHTS" in result.output


def test_cli_generate_json():
    result = runner.invoke(
        app,
        [
            "generate",
            "--enneagram", "5w4",
            "--tritype", "5-1-4",
            "--socionics", "ILI",
            "--realm", "FD",
            "--realm-tritype", "FD-CY-UN",
            "--json",
        ],
    )
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["element"]["element"] == "Metal"
    assert len(data["archetype"]["stat_blend_chain"]) == 3
    assert data["active_systems"] == ["enneagram", "socionics", "instincts"]


def test_cli_generate_rejects_bad_input():
    result = runner.invoke(app, ["generate", "--mbti", "INTX"])
    assert result.exit_code == 2
    assert "Unknown MBTI type" in result.output

    result = runner.invoke(app, ["generate", "--enneagram", "five"])
    assert result.exit_code == 2
    assert "5w4" in result.output


def test_cli_generate_backstory_disabled(monkeypatch):
    monkeypatch.delenv("USE_LLM_BACKSTORY", raising=False)
    result = runner.invoke(app, ["generate", "--mbti", "ENFP", "--backstory"])
    assert result.exit_code == 0, result.output
    assert "backstory disabled" in result.output


def test_cli_compare(tmp_path: Path):
    a_path = tmp_path / "a.json"
    b_path = tmp_path / "b.json"
    a_path.write_text(json.dumps({"mbti": "INTJ", "seed": 1}), encoding="utf-8")
    b_path.write_text(json.dumps({"mbti": "INFJ", "seed": 1}), encoding="utf-8")

    result = runner.invoke(app, ["compare", str(a_path), str(b_path), "--json"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["shared_function_list"] == ["Ni", "Se"]

    result = runner.invoke(app, ["compare", str(a_path), str(a_path)])
    assert result.exit_code == 0, result.output
    assert "Characters are identical." in result.output


def test_cli_compare_missing_file(tmp_path: Path):
    result = runner.invoke(app, ["compare", str(tmp_path / "nope.json"), str(tmp_path / "nope.json")])
    assert result.exit_code == 2
    assert "Could not read" in result.output


def test_cli_questions():
    result = runner.invoke(app, ["questions", "--mode", "quick", "--center", "PUR"])
    assert result.exit_code == 0, result.output
    assert "ap-1 [attitudinal]" in result.output
    assert "inst-pur-1 [instincts]" in result.output
    assert "    0: " in result.output


def test_cli_quiz(tmp_path: Path):
    answers = {q.id: 0 for q in questions_for("quick")}
    answers.update({q.id: 0 for q in realm_questions_for("quick", "SUR")})
    path = tmp_path / "answers.json"
    path.write_text(json.dumps(answers), encoding="utf-8")

    result = runner.invoke(app, ["quiz", str(path), "--mode", "quick", "--generate"])
    assert result.exit_code == 0, result.output
    assert "QUIZ RESULTS (quick)" in result.output
    assert "MBTI: " in result.output
    assert "[mbti]" in result.output
    assert "STATS" in result.output


def test_cli_quiz_incomplete(tmp_path: Path):
    path = tmp_path / "answers.json"
    path.write_text(json.dumps({"ap-1": 0}), encoding="utf-8")

    result = runner.invoke(app, ["quiz", str(path), "--systems", "attitudinal"])
    assert result.exit_code == 2
    assert "not complete" in result.output
