"""
Submission client for the spreadsheet-backed collection endpoint.

The endpoint is a third-party script that accepts one URL-encoded POST per
completed assessment. Any 2xx response counts as accepted; every other status
is a rejection; no response at all is a transport error. Nothing is retried
automatically, the user re-submits manually.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Mapping, Optional
import logging

import requests

from readiness.catalog import CONTACT_FIELDS, QuestionCatalog
from .state_manager import CHOICE_DELIMITER

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "✅ Thank you! Your responses have been submitted and emailed."
REJECTED_MESSAGE = "❌ Submission failed. Please try again."
TRANSPORT_ERROR_MESSAGE = "⚠️ An error occurred. Please try again later."

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class Outcome(Enum):
    SUCCESS = "success"
    REJECTED = "rejected"
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True)
class SubmissionResult:
    outcome: Outcome
    message: str
    status_code: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.SUCCESS


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a `Z` suffix."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def wire_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return CHOICE_DELIMITER.join(str(v) for v in value)
    return str(value)


def build_submission_record(
    state: Mapping[str, Any], catalog: QuestionCatalog, now: Optional[datetime] = None
) -> Dict[str, str]:
    """Build the exact payload sent over the wire.

    Every contact field and every question key is present (empty string when
    unanswered); multiple selections are joined with ", ".
    """
    record: Dict[str, str] = {"timestamp": utc_timestamp(now)}
    for key in list(CONTACT_FIELDS) + catalog.question_keys():
        record[key] = wire_value(state.get(key))
    return record


class SubmissionClient:
    """Posts validated answers to the configured endpoint."""

    def __init__(self, form_url: str, timeout: float = 15.0, catalog: Optional[QuestionCatalog] = None) -> None:
        self.form_url = form_url
        self.timeout = timeout
        self.catalog = catalog

    def submit(self, state: Mapping[str, Any], catalog: Optional[QuestionCatalog] = None) -> SubmissionResult:
        catalog = catalog or self.catalog
        if catalog is None:
            raise ValueError("A question catalog is required to build the submission record")
        record = build_submission_record(state, catalog)

        try:
            response = requests.post(
                self.form_url,
                data=record,
                headers={"Content-Type": FORM_CONTENT_TYPE},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Submission transport error | url={self.form_url} | error={e}")
            return SubmissionResult(Outcome.TRANSPORT_ERROR, TRANSPORT_ERROR_MESSAGE, error=str(e))

        if 200 <= response.status_code < 300:
            logger.info(f"Submission accepted | status={response.status_code}")
            return SubmissionResult(Outcome.SUCCESS, SUCCESS_MESSAGE, status_code=response.status_code)

        logger.warning(f"Submission rejected | status={response.status_code}")
        return SubmissionResult(
            Outcome.REJECTED,
            REJECTED_MESSAGE,
            status_code=response.status_code,
            error=f"HTTP {response.status_code}",
        )


__all__ = [
    "FORM_CONTENT_TYPE",
    "Outcome",
    "REJECTED_MESSAGE",
    "SUCCESS_MESSAGE",
    "SubmissionClient",
    "SubmissionResult",
    "TRANSPORT_ERROR_MESSAGE",
    "build_submission_record",
    "utc_timestamp",
]
