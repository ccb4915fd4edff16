from __future__ import annotations

from pathlib import Path

import pytest

from readiness.errors import StorageError
from readiness.storage import LocalStateStorage, MemoryStateStorage


def test_missing_slot_reads_as_none(tmp_path: Path):
	assert LocalStateStorage(tmp_path / "absent.json").read() is None


def test_write_then_read(tmp_path: Path):
	storage = LocalStateStorage(tmp_path / "nested" / "slot.json")
	storage.write({"name": "Ana", "q6": ["CRM", "ERP"]})
	assert storage.read() == {"name": "Ana", "q6": ["CRM", "ERP"]}
	# whole-document overwrite, no merge with the previous payload
	storage.write({"q1": "Costs"})
	assert storage.read() == {"q1": "Costs"}


@pytest.mark.parametrize("payload", ["{broken", "[1, 2, 3]", "\"just a string\"", ""])
def test_malformed_slot_reads_as_none(tmp_path: Path, payload: str):
	path = tmp_path / "slot.json"
	path.write_text(payload, encoding="utf-8")
	assert LocalStateStorage(path).read() is None


def test_write_failure_raises_storage_error(tmp_path: Path):
	blocker = tmp_path / "not_a_dir"
	blocker.write_text("x", encoding="utf-8")
	with pytest.raises(StorageError):
		LocalStateStorage(blocker / "slot.json").write({"name": "Ana"})


def test_clear(tmp_path: Path):
	storage = LocalStateStorage(tmp_path / "slot.json")
	storage.write({"name": "Ana"})
	storage.clear()
	storage.clear()
	assert storage.read() is None


def test_memory_storage_copies_payload():
	initial = {"q6": ["CRM"]}
	storage = MemoryStateStorage(initial)
	initial["q6"].append("ERP")
	assert storage.read() == {"q6": ["CRM"]}
