from __future__ import annotations

"""
Question catalog for the AI Readiness Assessment.

Responsibilities
- Define the immutable question/section records shown by the form.
- Flatten the ordered sections into the ordered list of question keys used by
  validation, progress, submission and export.
- Optionally load an alternative catalog from a YAML file so deployments and
  tests can inject their own questions instead of the built-in defaults.

The catalog is loaded once at start-up and never mutated afterwards.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

import yaml

from .errors import CatalogError


# Contact fields in display order. `country` is optional and is not counted
# towards progress; the other four are.
CONTACT_FIELDS: Tuple[str, ...] = ("name", "email", "organization", "country", "contact")
PROGRESS_CONTACT_FIELDS: Tuple[str, ...] = ("name", "email", "organization", "contact")
REQUIRED_CONTACT_FIELDS: Tuple[str, ...] = PROGRESS_CONTACT_FIELDS

CONTACT_LABELS: Dict[str, str] = {
    "name": "Full Name",
    "email": "Email Address",
    "organization": "Organization",
    "country": "Country",
    "contact": "Contact Number",
}

# ISO 3166 region codes offered by the country picker, in display order.
COUNTRIES: Tuple[Tuple[str, str], ...] = (
    ("KE", "Kenya"),
    ("NG", "Nigeria"),
    ("US", "United States"),
    ("CA", "Canada"),
    ("GB", "United Kingdom"),
    ("IN", "India"),
)
COUNTRY_CODES: Tuple[str, ...] = tuple(code for code, _ in COUNTRIES)


class SelectionMode(Enum):
    SINGLE = "single"
    MULTIPLE = "multiple"


@dataclass(frozen=True)
class Question:
    key: str
    prompt: str
    choices: Tuple[str, ...]
    mode: SelectionMode = SelectionMode.SINGLE

    @property
    def is_multiple(self) -> bool:
        return self.mode is SelectionMode.MULTIPLE


@dataclass(frozen=True)
class QuestionSection:
    title: str
    questions: Tuple[Question, ...]


class QuestionCatalog:
    """Ordered, read-only collection of question sections.

    Construction validates the catalog invariants:
    - every question key is unique across all sections
    - no question key shadows a contact field key
    - every question has at least one choice and no repeated choices
    """

    def __init__(self, sections: Iterable[QuestionSection]) -> None:
        self._sections: Tuple[QuestionSection, ...] = tuple(sections)
        self._by_key: Dict[str, Question] = {}
        for section in self._sections:
            for question in section.questions:
                if not question.key:
                    raise CatalogError(f"Question in section '{section.title}' has an empty key")
                if question.key in self._by_key:
                    raise CatalogError(f"Duplicate question key '{question.key}'")
                if question.key in CONTACT_FIELDS or question.key == "timestamp":
                    raise CatalogError(f"Question key '{question.key}' collides with a reserved field")
                if not question.choices:
                    raise CatalogError(f"Question '{question.key}' has no choices")
                if len(set(question.choices)) != len(question.choices):
                    raise CatalogError(f"Question '{question.key}' repeats a choice")
                self._by_key[question.key] = question
        self._question_keys: Tuple[str, ...] = tuple(self._by_key)
        self.total_field_count: int = len(self._question_keys) + len(PROGRESS_CONTACT_FIELDS)

    @property
    def sections(self) -> Tuple[QuestionSection, ...]:
        return self._sections

    def question_keys(self) -> List[str]:
        """Return every question key in catalog order."""
        return list(self._question_keys)

    def field_keys(self) -> List[str]:
        """Return contact fields followed by question keys (canonical field order)."""
        return list(CONTACT_FIELDS) + list(self._question_keys)

    def get(self, key: str) -> Question:
        try:
            return self._by_key[key]
        except KeyError:
            raise KeyError(f"Unknown question key '{key}'") from None

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def is_multiple(self, key: str) -> bool:
        question = self._by_key.get(key)
        return bool(question and question.is_multiple)

    def multiple_keys(self) -> List[str]:
        return [k for k, q in self._by_key.items() if q.is_multiple]


def _q(key: str, prompt: str, choices: Sequence[str], mode: SelectionMode = SelectionMode.SINGLE) -> Question:
    return Question(key=key, prompt=prompt, choices=tuple(choices), mode=mode)


DEFAULT_SECTIONS: Tuple[QuestionSection, ...] = (
    QuestionSection(
        title="Use Cases",
        questions=(
            _q(
                "q1",
                "What is the main reason you’re considering AI in your organization?",
                ["Efficiency", "Costs", "Decision-making", "Customer experience", "Not sure"],
            ),
            _q(
                "q2",
                "Do you already have areas or problems in mind where AI could help?",
                ["Yes", "Somewhat", "No"],
            ),
        ),
    ),
    QuestionSection(
        title="Data Readiness",
        questions=(
            _q("q3", "How is your organization’s data currently stored?", ["Digital", "Mixed", "Paper", "Not sure"]),
            _q("q4", "Do you have enough data available for AI to work with?", ["Yes", "Partially", "No", "Not sure"]),
            _q("q5", "Do you have data security or privacy measures in place?", ["Yes", "Partially", "No", "Not sure"]),
        ),
    ),
    QuestionSection(
        title="Technical Infrastructure",
        questions=(
            _q(
                "q6",
                "Which tools or platforms do you currently use to manage operations?",
                ["Microsoft 365 / Google Workspace", "CRM", "ERP", "None", "Other"],
                SelectionMode.MULTIPLE,
            ),
            _q("q7", "Can your current systems support AI tools or integrations?", ["Yes", "Somewhat", "No", "Not sure"]),
        ),
    ),
    QuestionSection(
        title="Team Readiness",
        questions=(
            _q("q8", "Does your team have technical expertise or experience with automation?", ["Yes", "Partially", "No"]),
            _q("q9", "Is there leadership support for AI initiatives in your organization?", ["Yes", "Partially", "No", "Not sure"]),
            _q(
                "q10",
                "Are there resources (time, budget, staff) already allocated to AI projects?",
                ["Yes", "In progress", "No", "Not sure"],
            ),
            _q("q11", "Is there any training program or plan to support AI-related skills?", ["Yes", "In development", "No"]),
        ),
    ),
)


def default_catalog() -> QuestionCatalog:
    return QuestionCatalog(DEFAULT_SECTIONS)


def _parse_question(raw: Mapping, section_title: str) -> Question:
    if not isinstance(raw, Mapping):
        raise CatalogError(f"Question entries in section '{section_title}' must be mappings")
    key = str(raw.get("key", "")).strip()
    prompt = str(raw.get("prompt", "")).strip()
    choices = raw.get("choices") or []
    if not isinstance(choices, list):
        raise CatalogError(f"Question '{key}': 'choices' must be a list")
    mode_raw = str(raw.get("mode", SelectionMode.SINGLE.value)).strip().lower()
    try:
        mode = SelectionMode(mode_raw)
    except ValueError:
        raise CatalogError(f"Question '{key}': unknown selection mode '{mode_raw}'") from None
    return Question(key=key, prompt=prompt, choices=tuple(str(c) for c in choices), mode=mode)


def catalog_from_dict(data: Mapping) -> QuestionCatalog:
    """Build a catalog from a `{sections: [{title, questions: [...]}]}` mapping."""
    if not isinstance(data, Mapping):
        raise CatalogError("Catalog document must be a mapping")
    raw_sections = data.get("sections")
    if not isinstance(raw_sections, list) or not raw_sections:
        raise CatalogError("Catalog document must contain a non-empty 'sections' list")

    sections: List[QuestionSection] = []
    for raw in raw_sections:
        if not isinstance(raw, Mapping):
            raise CatalogError("Section entries must be mappings")
        title = str(raw.get("title", "")).strip()
        questions = raw.get("questions") or []
        if not isinstance(questions, list):
            raise CatalogError(f"Section '{title}': 'questions' must be a list")
        sections.append(
            QuestionSection(title=title, questions=tuple(_parse_question(q, title) for q in questions))
        )
    return QuestionCatalog(sections)


def load_catalog(path: Path) -> QuestionCatalog:
    """Load a question catalog from a YAML file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
        data = yaml.safe_load(text) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise CatalogError(f"Failed to read catalog {path}: {exc}") from exc
    return catalog_from_dict(data)


__all__ = [
    "CONTACT_FIELDS",
    "CONTACT_LABELS",
    "COUNTRIES",
    "COUNTRY_CODES",
    "DEFAULT_SECTIONS",
    "PROGRESS_CONTACT_FIELDS",
    "REQUIRED_CONTACT_FIELDS",
    "Question",
    "QuestionCatalog",
    "QuestionSection",
    "SelectionMode",
    "catalog_from_dict",
    "default_catalog",
    "load_catalog",
]
