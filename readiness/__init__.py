"""AI Readiness Assessment core package.

Re-exports the catalog types and the session manager for convenient imports.
"""

from .catalog import (  # noqa: F401
    CONTACT_FIELDS,
    COUNTRIES,
    Question,
    QuestionCatalog,
    QuestionSection,
    SelectionMode,
    default_catalog,
    load_catalog,
)
from .config import AppConfig, load_config  # noqa: F401
from .ui_logic import AssessmentManager, Outcome, build_manager  # noqa: F401

__all__ = [
    "CONTACT_FIELDS",
    "COUNTRIES",
    "Question",
    "QuestionCatalog",
    "QuestionSection",
    "SelectionMode",
    "default_catalog",
    "load_catalog",
    "AppConfig",
    "load_config",
    "AssessmentManager",
    "Outcome",
    "build_manager",
]
