"""
Orchestration of one assessment session.

Control flow on submit: validation gate -> write normalized contact back into
the store -> one POST -> on success render the PDF of the submitted answers and
reset the store. Rejections and transport errors keep the answers so the user
can retry. A second submit while a request is in flight is refused.
"""

from dataclasses import dataclass
from typing import Optional
import logging

from readiness.catalog import QuestionCatalog, default_catalog, load_catalog
from readiness.config import AppConfig
from readiness.errors import IncompleteFormError, SubmissionInProgressError
from readiness.storage import LocalStateStorage
from .export_manager import ExportGenerator
from .state_manager import StateManager
from .submission_manager import SubmissionClient, SubmissionResult
from .validation_manager import ValidationManager, ValidationResult

logger = logging.getLogger(__name__)


@dataclass
class SubmitReport:
    """What the presentation layer needs after a submit attempt."""

    validation: ValidationResult
    submission: Optional[SubmissionResult] = None
    document: Optional[bytes] = None

    @property
    def message(self) -> str:
        if self.submission is not None:
            return self.submission.message
        return self.validation.message

    @property
    def ok(self) -> bool:
        return self.submission is not None and self.submission.ok


class AssessmentManager:
    """Ties the form store, validation, submission and export together."""

    def __init__(
        self,
        state_manager: StateManager,
        validation_manager: ValidationManager,
        submission_client: SubmissionClient,
        export_generator: ExportGenerator,
    ):
        self.state_manager = state_manager
        self.validation_manager = validation_manager
        self.submission_client = submission_client
        self.export_generator = export_generator
        self._in_flight = False
        self.last_report: Optional[SubmitReport] = None

    @property
    def catalog(self) -> QuestionCatalog:
        return self.state_manager.catalog

    @property
    def is_submitting(self) -> bool:
        return self._in_flight

    def can_submit(self) -> bool:
        return not self._in_flight

    def submit(self) -> SubmitReport:
        if self._in_flight:
            raise SubmissionInProgressError("A submission is already in progress")

        state = self.state_manager.get_state()
        validation = self.validation_manager.validate(state)
        if not validation.is_valid:
            report = SubmitReport(validation=validation)
            self.last_report = report
            return report

        normalized = validation.normalized_state or state
        self.state_manager.update_fields(
            contact=normalized.get("contact", ""),
            country=normalized.get("country", ""),
        )

        self._in_flight = True
        try:
            result = self.submission_client.submit(normalized, self.catalog)
        finally:
            self._in_flight = False

        report = SubmitReport(validation=validation, submission=result)
        if result.ok:
            report.document = self.export_generator.export_document(normalized)
            self.state_manager.reset()
            logger.info("Assessment submitted and form reset")
        self.last_report = report
        return report

    def can_export(self) -> bool:
        return self.state_manager.is_complete()

    def export(self) -> bytes:
        """Render the current answers on demand; only allowed once the form is complete."""
        if not self.can_export():
            missing = self.state_manager.missing_fields()
            raise IncompleteFormError(f"Cannot export an incomplete form (missing: {', '.join(missing)})")
        return self.export_generator.export_document(self.state_manager.get_state())


def build_manager(
    config: AppConfig,
    catalog: Optional[QuestionCatalog] = None,
    storage=None,
) -> AssessmentManager:
    """Wire up a manager from configuration."""
    if catalog is None:
        catalog = load_catalog(config.catalog_path) if config.catalog_path else default_catalog()
    if storage is None:
        storage = LocalStateStorage(config.state_path)
    return AssessmentManager(
        state_manager=StateManager(catalog, storage),
        validation_manager=ValidationManager(catalog, default_region=config.default_region),
        submission_client=SubmissionClient(config.form_url, timeout=config.request_timeout, catalog=catalog),
        export_generator=ExportGenerator(catalog, filename=config.export_filename),
    )


__all__ = ["AssessmentManager", "SubmitReport", "build_manager"]
