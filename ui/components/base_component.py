from __future__ import annotations

"""Base component class for the assessment Streamlit UI.

All sections inherit from `BaseComponent` and implement `render()`.
Components receive the session's `AssessmentManager` through their
constructor so widgets only ever mutate answers through the manager.
"""

from dataclasses import dataclass

import streamlit as st

from readiness.ui_logic import AssessmentManager

# Session keys shared by components
WIDGET_PREFIX = "field__"
INVALID_FIELDS_KEY = "invalid_fields"
MESSAGE_KEY = "status_message"
DOCUMENT_KEY = "submitted_document"


def widget_key(field: str, choice: str | None = None) -> str:
    return f"{WIDGET_PREFIX}{field}" if choice is None else f"{WIDGET_PREFIX}{field}__{choice}"


def clear_widget_state() -> None:
    """Drop cached widget values so inputs re-read the (reset) form state."""
    for key in [k for k in st.session_state.keys() if str(k).startswith(WIDGET_PREFIX)]:
        del st.session_state[key]


@dataclass
class BaseComponent:
    """Base class for all UI sections.

    Attributes:
        manager: Session manager owning the form answers
    """

    manager: AssessmentManager

    def render(self) -> None:
        """Render the component.

        Subclasses must override this method to draw Streamlit widgets.
        """
        raise NotImplementedError("Subclasses must implement render()")

    def is_invalid(self, field: str) -> bool:
        return bool(st.session_state.get(INVALID_FIELDS_KEY, {}).get(field))

    def flag_if_invalid(self, field: str) -> None:
        if self.is_invalid(field):
            st.caption(":red[This field needs your attention.]")
