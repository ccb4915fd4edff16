from __future__ import annotations

import streamlit as st

from readiness.errors import SubmissionInProgressError

from .base_component import (
    DOCUMENT_KEY,
    INVALID_FIELDS_KEY,
    MESSAGE_KEY,
    BaseComponent,
    clear_widget_state,
)


class SubmitPanel(BaseComponent):
    """Submit button, status message and the responses download.

    - Submit is disabled while a request is in flight
    - On success the generated PDF is offered for download and inputs reset
    - The on-demand download is enabled only once the form is complete
    """

    def _on_submit(self) -> None:
        try:
            report = self.manager.submit()
        except SubmissionInProgressError:
            st.session_state[MESSAGE_KEY] = ("info", "⏳ Your submission is still being sent.")
            return

        st.session_state[INVALID_FIELDS_KEY] = report.validation.invalid_fields
        if report.ok:
            st.session_state[MESSAGE_KEY] = ("success", report.message)
            st.session_state[DOCUMENT_KEY] = report.document
            clear_widget_state()
        elif report.submission is None:
            st.session_state[MESSAGE_KEY] = ("warning", report.message)
        else:
            st.session_state[MESSAGE_KEY] = ("error", report.message)

    def render(self) -> None:
        st.button(
            "Submit Assessment",
            type="primary",
            disabled=not self.manager.can_submit(),
            on_click=self._on_submit,
        )

        message = st.session_state.get(MESSAGE_KEY)
        if message:
            level, text = message
            getattr(st, level)(text)

        filename = self.manager.export_generator.filename
        mime = self.manager.export_generator.mime
        submitted = st.session_state.get(DOCUMENT_KEY)
        if submitted:
            st.download_button(
                "📥 Download My Responses",
                data=submitted,
                file_name=filename,
                mime=mime,
                key="download_submitted",
            )
            return

        ready = self.manager.can_export()
        st.download_button(
            "📥 Download My Responses",
            data=self.manager.export() if ready else b"",
            file_name=filename,
            mime=mime,
            disabled=not ready,
            help=None if ready else "Answer every question to download your responses.",
            key="download_current",
        )


def render_submit_panel(manager) -> None:
    SubmitPanel(manager).render()
