"""
AI Readiness Assessment - Streamlit entry point.

Single page: contact details, one container per question section, progress
bar, submit and download. All answer handling lives in `readiness.ui_logic`.

Run with: streamlit run ui/app.py
"""

from datetime import date
from pathlib import Path
import logging
import sys

import streamlit as st

# Ensure project root is on sys.path to enable readiness imports
project_root = Path(__file__).resolve().parents[1]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from readiness.config import load_config
from readiness.io_paths import LOGS_DIR
from readiness.ui_logic import AssessmentManager, build_manager
from readiness.utils_logging import configure_logging
from ui.components.base_component import DOCUMENT_KEY
from ui.components.contact_details import render_contact_details
from ui.components.question_section import render_question_section
from ui.components.submit_panel import render_submit_panel


st.set_page_config(page_title="AI Readiness Assessment", page_icon="🤖", layout="centered")

MANAGER_KEY = "assessment_manager"

logger = logging.getLogger("ui")


def _forget_submitted_document(old_state, new_state) -> None:
    # A new round of answers supersedes the last submitted PDF
    if new_state:
        st.session_state.pop(DOCUMENT_KEY, None)


def get_manager() -> AssessmentManager:
    if MANAGER_KEY not in st.session_state:
        config = load_config()
        configure_logging(LOGS_DIR, debug=config.debug)
        manager = build_manager(config)
        manager.state_manager.add_listener("state_changed", _forget_submitted_document)
        st.session_state[MANAGER_KEY] = manager
        logger.info("Started assessment session (endpoint %s)", config.form_url)
    return st.session_state[MANAGER_KEY]


def main() -> None:
    manager = get_manager()

    st.title("🤖 AI Readiness Assessment")
    st.caption("Evaluate your organization's AI potential in just 3 minutes.")

    progress = manager.state_manager.progress()
    st.progress(progress, text=f"{progress}% complete")

    render_contact_details(manager)
    for section in manager.catalog.sections:
        render_question_section(manager, section)

    render_submit_panel(manager)

    st.divider()
    st.caption(f"© {date.today().year} CRISP AI · contact@crispai.org")


if __name__ == "__main__":
    main()
