"""
Framework-agnostic business logic for the assessment form.

Nothing in this package imports Streamlit; the presentation layer only calls
into these managers and reads their results.
"""

from .state_manager import StateManager
from .validation_manager import ValidationManager
from .submission_manager import SubmissionClient, Outcome
from .export_manager import ExportGenerator
from .assessment_manager import AssessmentManager, SubmitReport, build_manager
from .progress import progress

__all__ = [
    "StateManager",
    "ValidationManager",
    "SubmissionClient",
    "Outcome",
    "ExportGenerator",
    "AssessmentManager",
    "SubmitReport",
    "build_manager",
    "progress",
]
