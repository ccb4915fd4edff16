from __future__ import annotations

import pytest

from readiness.config import AppConfig
from readiness.errors import IncompleteFormError
from readiness.storage import MemoryStateStorage
from readiness.ui_logic import ExportGenerator, build_manager
from readiness.ui_logic.export_manager import EXPORT_TITLE, render_lines


def test_render_lines_in_field_order(catalog):
	lines = render_lines({"q1": "Efficiency", "name": "Ana"}, catalog.field_keys())
	assert lines == [EXPORT_TITLE, "name: Ana", "q1: Efficiency"]


def test_render_lines_insertion_order_without_catalog():
	lines = render_lines({"name": "Ana", "q1": "Efficiency"})
	assert lines[1:] == ["name: Ana", "q1: Efficiency"]


def test_multiselect_joined_and_unknown_keys_last(catalog):
	lines = render_lines({"extra": "note", "q6": ["CRM", "ERP"], "email": "a@b.c"}, catalog.field_keys())
	assert lines[1:] == ["email: a@b.c", "q6: CRM, ERP", "extra: note"]


def test_export_document_is_pdf(catalog, complete_answers):
	generator = ExportGenerator(catalog)
	data = generator.export_document(complete_answers)
	assert data.startswith(b"%PDF")
	assert generator.filename == "AI_Readiness_Assessment.pdf"


def test_export_handles_non_latin1_text(catalog):
	data = ExportGenerator(catalog).export_document({"name": "Zoë 王", "q1": "Efficiency"})
	assert data.startswith(b"%PDF")


def test_on_demand_export_requires_complete_form(catalog, complete_answers):
	manager = build_manager(AppConfig(), catalog=catalog, storage=MemoryStateStorage())
	manager.state_manager.set_field("name", "Ana")
	assert not manager.can_export()
	with pytest.raises(IncompleteFormError):
		manager.export()

	manager.state_manager.update_fields(**complete_answers)
	assert manager.can_export()
	assert manager.export().startswith(b"%PDF")
