"""
MedTerms — Web UI (Streamlit)

Сторінка пояснення медичних термінів.

Запуск:
    streamlit run med_terms/web_ui/app.py

    або:

    python scripts/run_web.py
"""

import streamlit as st
import html
import sys
from pathlib import Path
from typing import List

# Додаємо корінь проекту
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from med_terms.client import TerminologyService
from med_terms.config import MedTermsConfig
from med_terms.web_ui.state import PageState, SearchController

TERM_KEY = "term_input"
STATE_KEY = "page_state"
SERVICE_KEY = "terminology_service"


# ============================================================================
# Ресурси
# ============================================================================

@st.cache_resource
def get_config() -> MedTermsConfig:
    return MedTermsConfig.from_env()


def get_service() -> TerminologyService:
    """Окремий сервіс (і requests.Session) на кожну сесію браузера"""
    if SERVICE_KEY not in st.session_state:
        config = get_config()
        if not config.backend.is_configured:
            print("⚠️ SUPABASE_URL не задано: запити завершуватимуться помилкою")
        st.session_state[SERVICE_KEY] = TerminologyService.from_config(config)
    return st.session_state[SERVICE_KEY]


def get_controller() -> SearchController:
    """Контролер поверх стану поточної сесії"""
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = PageState()
    if TERM_KEY not in st.session_state:
        st.session_state[TERM_KEY] = st.session_state[STATE_KEY].term
    return SearchController(st.session_state[STATE_KEY], get_service())


# ============================================================================
# Callbacks
# ============================================================================

def on_submit() -> None:
    get_controller().start(st.session_state[TERM_KEY])


def on_example(term: str) -> None:
    st.session_state[TERM_KEY] = term
    get_controller().select_example(term)


# ============================================================================
# Секції сторінки
# ============================================================================

def search_button_label(is_loading: bool) -> str:
    return "⏳ Searching" if is_loading else "🔍 Search"


def explanation_html(text: str) -> str:
    """Текст як є: HTML екрановано, переноси рядків збережено"""
    body = html.escape(text).replace("\n", "<br>")
    return f"<div style='white-space: pre-wrap; line-height: 1.6;'>{body}</div>"


def render_header(config: MedTermsConfig) -> None:
    st.markdown(
        f"<h1 style='text-align: center;'>❤️<br>{config.ui.page_title}</h1>",
        unsafe_allow_html=True,
    )
    st.markdown(
        "<p style='text-align: center; font-size: 1.25rem; opacity: 0.7;'>"
        "Understanding medical terms made simple</p>",
        unsafe_allow_html=True,
    )


def render_disclaimer() -> None:
    st.info(
        "This tool explains medical terms for educational purposes only. "
        "**It does not provide medical diagnosis or treatment advice.** "
        "Please consult a healthcare professional for medical concerns.",
        icon="ℹ️",
    )


def render_search_form(controller: SearchController, config: MedTermsConfig) -> None:
    is_loading = controller.state.is_loading

    with st.container(border=True):
        st.subheader("Search Medical Terms")
        st.caption("Enter any medical term, abbreviation, or phrase to learn more")

        with st.form("search_form", border=False):
            col1, col2 = st.columns([4, 1])
            with col1:
                st.text_input(
                    "Medical term",
                    key=TERM_KEY,
                    placeholder=config.ui.placeholder,
                    disabled=is_loading,
                    label_visibility="collapsed",
                )
            with col2:
                st.form_submit_button(
                    search_button_label(is_loading),
                    type="primary",
                    disabled=is_loading,
                    on_click=on_submit,
                )


def render_explanation(state: PageState) -> None:
    with st.container(border=True):
        st.subheader("Explanation")
        st.caption(f"Understanding: **{state.submitted_term}**")
        st.markdown(explanation_html(state.explanation), unsafe_allow_html=True)


def render_examples(terms: List[str]) -> None:
    with st.container(border=True):
        st.subheader("Try These Examples")
        st.caption("Click any term to search")

        cols = st.columns(4)
        for i, term in enumerate(terms):
            cols[i % 4].button(
                term,
                key=f"example_{term}",
                on_click=on_example,
                args=(term,),
            )


def main():
    config = get_config()

    # Налаштування сторінки
    st.set_page_config(
        page_title=config.ui.page_title,
        page_icon=config.ui.page_icon,
        layout=config.ui.layout.value,
    )

    controller = get_controller()
    state = controller.state

    for notification in controller.pop_notifications():
        st.toast(notification.text, icon=notification.icon)

    render_header(config)
    render_disclaimer()
    render_search_form(controller, config)

    # Запит виконується після того, як форма відмальована як disabled
    if state.is_loading:
        with st.spinner("Searching..."):
            controller.complete()
        st.rerun()

    if state.explanation:
        render_explanation(state)

    if state.show_examples:
        render_examples(config.ui.example_terms)


if __name__ == "__main__":
    main()
