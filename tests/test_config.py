from __future__ import annotations

from pathlib import Path

import pytest

from readiness.config import DEFAULT_FORM_URL, AppConfig, load_config
from readiness.errors import ConfigError


def test_defaults_without_env():
	config = load_config(environ={})
	assert config.form_url == DEFAULT_FORM_URL
	assert config.default_region == "KE"
	assert config.state_path.name == "ai_readiness_form.json"


def test_yaml_then_env_override(tmp_path: Path):
	path = tmp_path / "app.yaml"
	path.write_text("form_url: https://forms.example.test/exec\nrequest_timeout: 5\ndefault_region: us\n", encoding="utf-8")
	config = load_config(path, environ={"READINESS_REQUEST_TIMEOUT": "7.5", "READINESS_STATE_DIR": str(tmp_path)})
	assert config.form_url == "https://forms.example.test/exec"
	assert config.request_timeout == 7.5
	assert config.default_region == "US"
	assert config.state_path == tmp_path / "ai_readiness_form.json"


@pytest.mark.parametrize(
	"text",
	[
		"request_timeout: -1\n",
		"request_timeout: soon\n",
		"form_url: ftp://example.test\n",
		"default_region: Kenya\n",
		"colour: blue\n",
		"- not\n- a mapping\n",
	],
)
def test_invalid_values_raise(tmp_path: Path, text: str):
	path = tmp_path / "app.yaml"
	path.write_text(text, encoding="utf-8")
	with pytest.raises(ConfigError):
		load_config(path, environ={})


def test_explicit_missing_file_raises(tmp_path: Path):
	with pytest.raises(ConfigError):
		load_config(tmp_path / "missing.yaml", environ={})


def test_debug_flag_from_env():
	assert load_config(environ={"READINESS_DEBUG": "true"}).debug is True
	assert AppConfig().debug is False


def test_slot_and_export_name_from_env(tmp_path: Path):
	config = load_config(
		environ={
			"READINESS_STATE_DIR": str(tmp_path),
			"READINESS_STATE_SLOT": "pilot_form",
			"READINESS_EXPORT_FILENAME": "Pilot.pdf",
		}
	)
	assert config.state_path == tmp_path / "pilot_form.json"
	assert config.export_filename == "Pilot.pdf"
