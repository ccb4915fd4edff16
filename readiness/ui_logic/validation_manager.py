"""
Framework-agnostic validation for the assessment form.

Validation runs only when a submission is requested and is a two-phase gate:

1. Presence: every required contact field and every question must be
   answered, and the email must contain "@". Country is optional but, when
   given, must be one of the offered region codes.
2. Phone: entered only when presence passes. The contact number is parsed
   with `phonenumbers` using the selected country (or the configured default
   region) as a hint. On success the number is rewritten in international
   display format, e.g. "+254 712 345678".

Either failure is terminal for the attempt. Presence failures carry per-field
flags for highlighting; a phone failure carries only its message.
"""

from typing import Any, Dict, List, Mapping, Optional
import logging

import phonenumbers
from phonenumbers import NumberParseException, PhoneNumberFormat

from readiness.catalog import COUNTRY_CODES, REQUIRED_CONTACT_FIELDS, QuestionCatalog
from .progress import is_filled

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "❗ Please fill in all required fields."
INVALID_EMAIL_MESSAGE = "❗ Please enter a valid email address."
INVALID_PHONE_MESSAGE = "❗ Please enter a valid phone number in international format, e.g., +254... or +1..."

PRESENCE = "presence"
PHONE = "phone"

# E.164 caps a number at 15 digits
MAX_PHONE_DIGITS = 15


def mask_phone_input(raw: str) -> str:
    """Input mask for the contact field: a leading '+' followed by digits only."""
    digits = "".join(ch for ch in str(raw or "") if ch.isdigit())[:MAX_PHONE_DIGITS]
    return f"+{digits}" if digits else ""


class ValidationError:
    """Represents a validation error with context."""

    def __init__(self, field: str, message: str, severity: str = "error"):
        self.field = field
        self.message = message
        self.severity = severity

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"

    def __repr__(self) -> str:
        return f"ValidationError(field={self.field!r}, message={self.message!r})"

    def to_dict(self) -> Dict:
        return {
            'field': self.field,
            'message': self.message,
            'severity': self.severity,
        }


class ValidationResult:
    """Represents the result of one submission-time validation."""

    def __init__(self, is_valid: bool = True, errors: Optional[List[ValidationError]] = None):
        self.is_valid = is_valid
        self.errors = errors or []
        self.kind: Optional[str] = None
        self.message: str = ""
        self.normalized_state: Optional[Dict[str, Any]] = None

    def add_error(self, error: ValidationError) -> None:
        """Add an error to the result."""
        self.errors.append(error)
        self.is_valid = False

    @property
    def invalid_fields(self) -> Dict[str, bool]:
        """Per-field invalid flags consumed by the presentation layer."""
        return {error.field: True for error in self.errors if error.field}

    def get_errors_by_field(self, field: str) -> List[ValidationError]:
        return [error for error in self.errors if error.field == field]

    def to_dict(self) -> Dict:
        return {
            'is_valid': self.is_valid,
            'kind': self.kind,
            'message': self.message,
            'errors': [error.to_dict() for error in self.errors],
            'invalid_fields': self.invalid_fields,
        }


class ValidationManager:
    """Presence and phone checks over a form state snapshot."""

    def __init__(self, catalog: QuestionCatalog, default_region: Optional[str] = "KE"):
        self.catalog = catalog
        self.default_region = default_region

    def required_fields(self) -> List[str]:
        return list(REQUIRED_CONTACT_FIELDS) + self.catalog.question_keys()

    def check_presence(self, state: Mapping[str, Any]) -> ValidationResult:
        result = ValidationResult()
        for key in self.required_fields():
            if not is_filled(state.get(key)):
                result.add_error(ValidationError(key, "This field is required"))

        email = state.get("email")
        if is_filled(email) and "@" not in str(email):
            result.add_error(ValidationError("email", "Email address must contain '@'"))

        country = state.get("country")
        if is_filled(country) and str(country).strip().upper() not in COUNTRY_CODES:
            result.add_error(ValidationError("country", f"Unsupported country '{country}'"))

        if not result.is_valid:
            result.kind = PRESENCE
            if set(result.invalid_fields) == {"email"}:
                result.message = INVALID_EMAIL_MESSAGE
            else:
                result.message = MISSING_FIELDS_MESSAGE
        return result

    def parse_phone(self, raw: str, region: Optional[str] = None) -> Optional[phonenumbers.PhoneNumber]:
        """Parse and validate a phone number; None when unusable."""
        hint = (region or self.default_region or None)
        try:
            number = phonenumbers.parse(str(raw or "").strip(), hint)
        except NumberParseException as e:
            logger.debug("Phone number rejected by parser: %s", e)
            return None
        if not phonenumbers.is_valid_number(number):
            return None
        return number

    def check_phone(self, state: Mapping[str, Any]) -> ValidationResult:
        result = ValidationResult()
        country = str(state.get("country") or "").strip().upper() or None
        number = self.parse_phone(state.get("contact", ""), country)
        if number is None:
            result.is_valid = False
            result.kind = PHONE
            result.message = INVALID_PHONE_MESSAGE
            return result

        normalized = dict(state)
        normalized["contact"] = phonenumbers.format_number(number, PhoneNumberFormat.INTERNATIONAL)
        if country:
            normalized["country"] = country
        else:
            region = phonenumbers.region_code_for_number(number)
            normalized["country"] = region if region in COUNTRY_CODES else ""
        result.normalized_state = normalized
        return result

    def validate(self, state: Mapping[str, Any]) -> ValidationResult:
        """Run the full two-phase gate."""
        presence = self.check_presence(state)
        if not presence.is_valid:
            logger.info("Submission blocked: missing or invalid fields %s", sorted(presence.invalid_fields))
            return presence
        phone = self.check_phone(state)
        if not phone.is_valid:
            logger.info("Submission blocked: invalid phone number")
        return phone


__all__ = [
    "INVALID_EMAIL_MESSAGE",
    "INVALID_PHONE_MESSAGE",
    "MAX_PHONE_DIGITS",
    "MISSING_FIELDS_MESSAGE",
    "PHONE",
    "PRESENCE",
    "ValidationError",
    "ValidationManager",
    "ValidationResult",
    "mask_phone_input",
]
