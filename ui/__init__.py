"""UI package for the AI Readiness Assessment Streamlit application.

Having this file ensures `ui` is treated as a proper Python package in
all execution contexts (Streamlit, pytest, CLI), so `ui.components.*`
imports resolve from within `ui/app.py`.
"""
