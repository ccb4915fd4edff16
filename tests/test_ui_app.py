from __future__ import annotations

from pathlib import Path

import pytest

from streamlit.testing.v1 import AppTest

APP_PATH = Path(__file__).resolve().parents[1] / "ui" / "app.py"


@pytest.fixture
def app(tmp_path: Path, monkeypatch, log_dir):
	# Keep the saved-answers slot and the log file out of the working tree
	monkeypatch.setenv("READINESS_STATE_DIR", str(tmp_path))
	at = AppTest.from_file(str(APP_PATH), default_timeout=30)
	at.run()
	return at


def test_renders_form(app):
	assert not app.exception
	assert "AI Readiness Assessment" in app.title[0].value
	# ten single-choice questions, five tool checkboxes
	assert len(app.radio) == 10
	assert len(app.checkbox) == 5
	assert len(app.text_input) == 4


def test_typing_updates_saved_state(app, tmp_path: Path):
	app.text_input(key="field__name").set_value("Ana").run()
	manager = app.session_state["assessment_manager"]
	assert manager.state_manager.get("name") == "Ana"
	assert (tmp_path / "ai_readiness_form.json").exists()


def test_submitting_empty_form_shows_message(app):
	app.button[0].click().run()
	assert not app.exception
	assert any("required" in w.value for w in app.warning)
