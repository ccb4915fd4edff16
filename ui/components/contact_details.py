from __future__ import annotations

import streamlit as st

from readiness.catalog import CONTACT_LABELS, COUNTRIES
from readiness.ui_logic.validation_manager import mask_phone_input

from .base_component import BaseComponent, widget_key

_COUNTRY_NAMES = dict(COUNTRIES)
_NO_COUNTRY = ""


class ContactDetailsSection(BaseComponent):
    """Contact inputs: name, email, organization, country picker and phone."""

    def _on_text_change(self, field: str) -> None:
        self.manager.state_manager.set_field(field, st.session_state[widget_key(field)])

    def _on_contact_change(self) -> None:
        key = widget_key("contact")
        masked = mask_phone_input(st.session_state[key])
        st.session_state[key] = masked
        self.manager.state_manager.set_field("contact", masked)

    def render(self) -> None:
        state = self.manager.state_manager
        with st.container(border=True):
            st.subheader("Your Contact Details")

            for field in ("name", "email", "organization"):
                st.text_input(
                    CONTACT_LABELS[field],
                    value=state.get(field, ""),
                    key=widget_key(field),
                    on_change=self._on_text_change,
                    args=(field,),
                )
                self.flag_if_invalid(field)

            options = [_NO_COUNTRY] + list(_COUNTRY_NAMES)
            saved = state.get("country", "")
            st.selectbox(
                CONTACT_LABELS["country"],
                options=options,
                index=options.index(saved) if saved in options else 0,
                format_func=lambda code: _COUNTRY_NAMES.get(code, "Select a country (optional)"),
                key=widget_key("country"),
                on_change=self._on_text_change,
                args=("country",),
            )
            self.flag_if_invalid("country")

            # Seeded through session state because the mask rewrites it in the callback
            contact_key = widget_key("contact")
            if contact_key not in st.session_state:
                st.session_state[contact_key] = state.get("contact", "")
            st.text_input(
                CONTACT_LABELS["contact"],
                key=contact_key,
                placeholder="e.g. +254712345678",
                on_change=self._on_contact_change,
            )
            self.flag_if_invalid("contact")


def render_contact_details(manager) -> None:
    ContactDetailsSection(manager).render()
