"""
Downloadable PDF copy of the answers.

The document is a title line followed by one "<key>: <value>" line per
field of the state, in canonical field order (contact fields, then questions, then
anything else in insertion order). Rendering is pure: no network, no storage.
"""

from typing import Any, Iterable, List, Mapping, Optional
import logging

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from readiness.catalog import CONTACT_FIELDS, QuestionCatalog
from .submission_manager import wire_value

logger = logging.getLogger(__name__)

EXPORT_TITLE = "AI Readiness Assessment Responses"
DEFAULT_EXPORT_FILENAME = "AI_Readiness_Assessment.pdf"
PDF_MIME = "application/pdf"


def ordered_keys(state: Mapping[str, Any], field_order: Optional[Iterable[str]] = None) -> List[str]:
    order = list(field_order) if field_order is not None else list(CONTACT_FIELDS)
    keys = [k for k in order if k in state]
    keys += [k for k in state if k not in keys]
    return keys


def render_lines(state: Mapping[str, Any], field_order: Optional[Iterable[str]] = None) -> List[str]:
    """Return the document lines: the title, then one line per field in the state."""
    lines = [EXPORT_TITLE]
    for key in ordered_keys(state, field_order):
        lines.append(f"{key}: {wire_value(state[key])}")
    return lines


def _latin1(text: str) -> str:
    # Core PDF fonts only cover Latin-1
    return text.encode("latin-1", "replace").decode("latin-1")


class ExportGenerator:
    """Renders a form state into PDF bytes."""

    def __init__(self, catalog: Optional[QuestionCatalog] = None, filename: str = DEFAULT_EXPORT_FILENAME):
        self.catalog = catalog
        self.filename = filename
        self.mime = PDF_MIME

    def lines(self, state: Mapping[str, Any]) -> List[str]:
        order = self.catalog.field_keys() if self.catalog is not None else None
        return render_lines(state, order)

    def export_document(self, state: Mapping[str, Any]) -> bytes:
        lines = self.lines(state)

        pdf = FPDF()
        pdf.set_title(EXPORT_TITLE)
        pdf.set_auto_page_break(auto=True, margin=15)
        pdf.add_page()
        pdf.set_left_margin(20)
        pdf.set_xy(20, 15)

        pdf.set_font("Helvetica", style="B", size=14)
        pdf.multi_cell(0, 10, _latin1(lines[0]), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_font("Helvetica", size=14)
        for line in lines[1:]:
            pdf.multi_cell(0, 10, _latin1(line), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        data = bytes(pdf.output())
        logger.debug("Rendered %d answer lines into %d PDF bytes", len(lines) - 1, len(data))
        return data


__all__ = [
    "DEFAULT_EXPORT_FILENAME",
    "EXPORT_TITLE",
    "ExportGenerator",
    "PDF_MIME",
    "render_lines",
]
