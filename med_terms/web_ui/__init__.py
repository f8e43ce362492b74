"""
MedTerms — Web UI Module

Streamlit сторінка пояснення медичних термінів.

Запуск:
    streamlit run med_terms/web_ui/app.py

    або:

    python scripts/run_web.py

Вимоги:
    - Streamlit >= 1.35.0
    - SUPABASE_URL та SUPABASE_PUBLISHABLE_KEY в environment
"""

from .state import (
    PageState,
    SearchController,
    SearchPhase,
    EXAMPLE_TERMS,
    EMPTY_TERM_NOTICE,
    FETCH_FAILED_NOTICE,
)

__all__ = [
    "PageState",
    "SearchController",
    "SearchPhase",
    "EXAMPLE_TERMS",
    "EMPTY_TERM_NOTICE",
    "FETCH_FAILED_NOTICE",
]
