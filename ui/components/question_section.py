from __future__ import annotations

import streamlit as st

from readiness.catalog import Question, QuestionSection

from .base_component import BaseComponent, widget_key


class QuestionSectionComponent(BaseComponent):
    """One catalog section: radios for single choice, checkboxes for multiple."""

    def __init__(self, manager, section: QuestionSection) -> None:
        super().__init__(manager)
        self.section = section

    def _on_single_change(self, question: Question) -> None:
        value = st.session_state[widget_key(question.key)]
        self.manager.state_manager.set_field(question.key, value or "")

    def _on_choice_toggle(self, question: Question, choice: str) -> None:
        checked = bool(st.session_state[widget_key(question.key, choice)])
        self.manager.state_manager.toggle_choice(question.key, choice, checked)

    def _render_single(self, question: Question) -> None:
        saved = self.manager.state_manager.get(question.key, "")
        st.radio(
            question.prompt,
            options=list(question.choices),
            index=question.choices.index(saved) if saved in question.choices else None,
            horizontal=True,
            key=widget_key(question.key),
            on_change=self._on_single_change,
            args=(question,),
        )

    def _render_multiple(self, question: Question) -> None:
        selected = self.manager.state_manager.get(question.key) or []
        st.markdown(question.prompt)
        cols = st.columns(3)
        for idx, choice in enumerate(question.choices):
            with cols[idx % 3]:
                st.checkbox(
                    choice,
                    value=choice in selected,
                    key=widget_key(question.key, choice),
                    on_change=self._on_choice_toggle,
                    args=(question, choice),
                )

    def render(self) -> None:
        with st.container(border=True):
            st.subheader(self.section.title)
            for question in self.section.questions:
                if question.is_multiple:
                    self._render_multiple(question)
                else:
                    self._render_single(question)
                self.flag_if_invalid(question.key)


def render_question_section(manager, section: QuestionSection) -> None:
    QuestionSectionComponent(manager, section).render()
