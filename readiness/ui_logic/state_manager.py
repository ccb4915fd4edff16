"""
Framework-agnostic form state management for the assessment UI.

This module owns the in-memory answers of one form session and mirrors them to
the persisted slot after every mutation. Text and single-selection fields hold
strings; multiple-selection fields hold ordered, duplicate-free lists of the
selected choices. Joining selections into one string only happens at the wire
and export boundaries.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional
import logging

from readiness.catalog import CONTACT_FIELDS, REQUIRED_CONTACT_FIELDS, QuestionCatalog
from readiness.errors import StorageError
from .progress import is_filled, progress

logger = logging.getLogger(__name__)

# Separator used by older saved states and by the wire format
CHOICE_DELIMITER = ", "

FormState = Dict[str, Any]


def _unique(items: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(items))


class StateManager:
    """
    Form State Store.

    Holds the answers of the current session, notifies listeners on change and
    persists the whole state after every mutation. Any object with
    `read() -> dict | None` and `write(dict)` can serve as storage.
    """

    def __init__(self, catalog: QuestionCatalog, storage: Any = None):
        self.catalog = catalog
        self.storage = storage
        self._state: FormState = {}
        self._listeners: Dict[str, List[Callable]] = {}
        self.restore()

    def get_state(self) -> FormState:
        """Return a snapshot of the current answers."""
        return {k: (list(v) if isinstance(v, list) else v) for k, v in self._state.items()}

    def get(self, key: str, default: Any = None) -> Any:
        value = self._state.get(key, default)
        return list(value) if isinstance(value, list) else value

    def set_field(self, key: str, value: Any) -> None:
        """Overwrite a text or single-selection field.

        Multiple-selection fields accept a list of choices or a joined string.
        """
        self._check_key(key)
        new_state = dict(self._state)
        new_state[key] = self._normalize(key, value, strict=True)
        self._commit(new_state)

    def toggle_choice(self, key: str, choice: str, included: bool) -> None:
        """Add or remove one choice of a multiple-selection field."""
        if not self.catalog.is_multiple(key):
            raise ValueError(f"Field '{key}' is not a multiple-selection question")
        question = self.catalog.get(key)
        if choice not in question.choices:
            raise ValueError(f"'{choice}' is not a choice of '{key}'")

        current = list(self._state.get(key) or [])
        if included and choice not in current:
            current.append(choice)
        elif not included and choice in current:
            current.remove(choice)
        else:
            return

        new_state = dict(self._state)
        new_state[key] = current
        self._commit(new_state)

    def update_fields(self, **values: Any) -> None:
        """Set several fields at once with a single persist."""
        new_state = dict(self._state)
        for key, value in values.items():
            self._check_key(key)
            new_state[key] = self._normalize(key, value, strict=True)
        self._commit(new_state)

    def reset(self) -> None:
        """Clear every field."""
        self._commit({})

    def restore(self) -> None:
        """Load answers from storage; anything malformed is treated as no saved state."""
        if self.storage is None:
            return
        try:
            data = self.storage.read()
        except Exception as e:
            logger.warning(f"Failed to read saved form state, starting empty: {e}")
            data = None
        if not isinstance(data, dict):
            self._state = {}
            return

        restored: FormState = {}
        for key, value in data.items():
            if key not in CONTACT_FIELDS and key not in self.catalog:
                logger.debug("Dropping unknown saved field '%s'", key)
                continue
            try:
                restored[key] = self._normalize(key, value, strict=False)
            except ValueError:
                logger.debug("Dropping malformed saved value for '%s'", key)
        self._state = restored
        logger.info("Restored %d saved answers", sum(1 for v in restored.values() if is_filled(v)))

    def persist(self) -> None:
        """Write the whole state to storage."""
        if self.storage is None:
            return
        self.storage.write(self.get_state())

    def progress(self) -> int:
        return progress(self._state, self.catalog.total_field_count)

    def missing_fields(self) -> List[str]:
        required = list(REQUIRED_CONTACT_FIELDS) + self.catalog.question_keys()
        return [k for k in required if not is_filled(self._state.get(k))]

    def is_complete(self) -> bool:
        return not self.missing_fields()

    def add_listener(self, event: str, callback: Callable) -> None:
        """Add a listener for state change events."""
        if event not in self._listeners:
            self._listeners[event] = []
        self._listeners[event].append(callback)

    def remove_listener(self, event: str, callback: Callable) -> None:
        """Remove a listener for state change events."""
        if event in self._listeners:
            try:
                self._listeners[event].remove(callback)
            except ValueError:
                pass

    def _commit(self, new_state: FormState) -> None:
        old_state = self.get_state()
        self._state = new_state
        try:
            self.persist()
        except StorageError:
            logger.warning("Form state kept in memory only; persisted copy is stale")
        self._notify_listeners("state_changed", old_state, self.get_state())

    def _notify_listeners(self, event: str, *args, **kwargs) -> None:
        """Notify all listeners for a specific event."""
        if event in self._listeners:
            for callback in self._listeners[event]:
                try:
                    callback(*args, **kwargs)
                except Exception as e:
                    logger.error(f"Error in state listener callback: {e}")

    def _check_key(self, key: str) -> None:
        if key not in CONTACT_FIELDS and key not in self.catalog:
            raise KeyError(f"Unknown form field '{key}'")

    def _normalize(self, key: str, value: Any, strict: bool) -> Any:
        if key in CONTACT_FIELDS:
            if value is None:
                return ""
            if not isinstance(value, (str, int, float)) or isinstance(value, bool):
                raise ValueError(f"Field '{key}' expects text")
            return str(value)

        question = self.catalog.get(key)
        if question.is_multiple:
            if value is None or value == "":
                return []
            if isinstance(value, str):
                items = [part for part in value.split(CHOICE_DELIMITER) if part]
            elif isinstance(value, (list, tuple)):
                items = [str(v) for v in value]
            else:
                raise ValueError(f"Field '{key}' expects a list of choices")
            unknown = [v for v in items if v not in question.choices]
            if unknown and strict:
                raise ValueError(f"Unknown choices for '{key}': {unknown}")
            return _unique(v for v in items if v in question.choices)

        if value is None:
            return ""
        if not isinstance(value, str):
            raise ValueError(f"Field '{key}' expects a single choice")
        if value and value not in question.choices:
            raise ValueError(f"'{value}' is not a choice of '{key}'")
        return value


__all__ = ["CHOICE_DELIMITER", "FormState", "StateManager"]
