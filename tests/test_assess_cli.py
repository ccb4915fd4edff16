from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

import assess


@pytest.fixture(autouse=True)
def cli_logs(log_dir, monkeypatch):
	monkeypatch.setattr(assess, "LOGS_DIR", log_dir)
	return log_dir


def _write_answers(tmp_path: Path, answers: dict) -> Path:
	path = tmp_path / "answers.json"
	path.write_text(json.dumps(answers), encoding="utf-8")
	return path


def test_validate_and_export(tmp_path: Path, complete_answers, capsys):
	answers = _write_answers(tmp_path, complete_answers)
	out = tmp_path / "out" / "responses.pdf"
	rc = assess.main(["--answers", str(answers), "--export", str(out)])
	assert rc == 0
	assert out.read_bytes().startswith(b"%PDF")
	assert "OK" in capsys.readouterr().out


def test_yaml_answers_with_joined_multiselect(tmp_path: Path):
	path = tmp_path / "answers.yaml"
	path.write_text(
		"name: Ana\nemail: ana@example.org\norganization: Acme\ncontact: '+254712345678'\n"
		+ "".join(f"q{i}: 'Yes'\n" for i in (2, 4, 5, 7, 8, 9, 10, 11))
		+ "q1: Costs\nq3: Digital\nq6: CRM, ERP\n",
		encoding="utf-8",
	)
	assert assess.main(["--answers", str(path)]) == 0


def test_invalid_answers_exit_code(tmp_path: Path, complete_answers, capsys):
	complete_answers["email"] = "nobody"
	rc = assess.main(["--answers", str(_write_answers(tmp_path, complete_answers))])
	assert rc == 1
	assert "email" in capsys.readouterr().out


def test_submit(tmp_path: Path, complete_answers):
	response = Mock()
	response.status_code = 200
	with patch("readiness.ui_logic.submission_manager.requests.post", return_value=response) as mock_post:
		rc = assess.main(["--answers", str(_write_answers(tmp_path, complete_answers)), "--submit"])
	assert rc == 0
	mock_post.assert_called_once()


def test_unreadable_answers(tmp_path: Path):
	assert assess.main(["--answers", str(tmp_path / "missing.json")]) == 2


def test_yaml_answers_with_unquoted_yes_no(tmp_path: Path, cli_logs: Path, capsys):
	path = tmp_path / "answers.yaml"
	path.write_text(
		"name: Ana\nemail: ana@example.org\norganization: Acme\ncontact: +254712345678\n"
		"q1: Costs\nq2: Yes\nq3: Digital\nq4: No\nq5: Yes\nq6: [CRM, ERP]\nq7: Somewhat\n"
		"q8: No\nq9: Yes\nq10: In progress\nq11: No\n",
		encoding="utf-8",
	)
	assert assess.main(["--answers", str(path)]) == 0
	assert "OK" in capsys.readouterr().out
	assert cli_logs.is_dir()
