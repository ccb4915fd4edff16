"""UI components package for the assessment Streamlit application.

Each section defines a class inheriting from `BaseComponent` with a
`render()` method plus a `render_*` convenience function.
"""

from .base_component import BaseComponent  # re-export for convenience

__all__ = [
    "BaseComponent",
]
