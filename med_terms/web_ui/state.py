"""
MedTerms — Стан сторінки та контролер пошуку

Логіка форми без залежності від Streamlit:
    Idle → Loading → (Result | Error) → Idle

Сторінка (app.py) зберігає PageState у st.session_state і викликає:
    controller.start(term)   # валідація, loading=True, очищення пояснення
    controller.complete()    # виклик backend, loading=False у будь-якому разі
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Protocol

from ..config import DEFAULT_EXAMPLE_TERMS
from ..errors import MedTermsError
from ..schemas import Notification, NotificationVariant


EXAMPLE_TERMS = tuple(DEFAULT_EXAMPLE_TERMS)

EMPTY_TERM_NOTICE = Notification(
    title="Please enter a term",
    description="Type a medical term to get started",
    variant=NotificationVariant.DESTRUCTIVE,
)

FETCH_FAILED_NOTICE = Notification(
    title="Error",
    description="Failed to fetch explanation. Please try again.",
    variant=NotificationVariant.DESTRUCTIVE,
)


class ExplanationSource(Protocol):
    def explain(self, term: str) -> str: ...


class SearchPhase(str, Enum):
    """Фаза сторінки"""
    IDLE = "idle"
    LOADING = "loading"
    RESULT = "result"


@dataclass
class PageState:
    """Стан однієї сесії сторінки (живе лише в пам'яті)"""
    term: str = ""
    explanation: str = ""
    is_loading: bool = False
    submitted_term: str = ""
    pending_term: Optional[str] = None
    notifications: List[Notification] = field(default_factory=list)

    @property
    def phase(self) -> SearchPhase:
        if self.is_loading:
            return SearchPhase.LOADING
        if self.explanation:
            return SearchPhase.RESULT
        return SearchPhase.IDLE

    @property
    def show_examples(self) -> bool:
        return not self.explanation and not self.is_loading


class SearchController:
    """
    Контролер форми пошуку.

    Приклад:
        controller = SearchController(PageState(), service)
        controller.submit("  Tachycardia ")
        print(controller.state.explanation)
    """

    def __init__(self, state: PageState, service: ExplanationSource):
        self.state = state
        self.service = service

    def notify(self, notification: Notification) -> None:
        self.state.notifications.append(notification)

    def pop_notifications(self) -> List[Notification]:
        """Забрати всі повідомлення, що очікують показу"""
        pending = self.state.notifications
        self.state.notifications = []
        return pending

    def set_term(self, term: str) -> None:
        self.state.term = term

    def start(self, term: Optional[str] = None) -> bool:
        """
        Почати пошук.

        Returns:
            True якщо запит поставлено в чергу (loading=True),
            False якщо термін порожній або запит уже виконується.
        """
        if self.state.is_loading:
            return False

        if term is not None:
            self.state.term = term

        cleaned = self.state.term.strip()
        if not cleaned:
            self.notify(EMPTY_TERM_NOTICE)
            return False

        self.state.is_loading = True
        self.state.explanation = ""
        self.state.pending_term = cleaned
        self.state.submitted_term = cleaned
        return True

    def complete(self) -> bool:
        """
        Виконати запит, поставлений start().

        Returns:
            True якщо пояснення отримано.
        """
        if not self.state.is_loading or self.state.pending_term is None:
            return False

        try:
            self.state.explanation = self.service.explain(self.state.pending_term)
            return True
        except MedTermsError as e:
            print(f"❌ Error fetching explanation: {e}")
            self.notify(FETCH_FAILED_NOTICE)
            return False
        finally:
            self.state.is_loading = False
            self.state.pending_term = None

    def submit(self, term: Optional[str] = None) -> bool:
        """start() + complete() за один крок"""
        if not self.start(term):
            return False
        return self.complete()

    def select_example(self, term: str) -> bool:
        """Клік по прикладу: заповнити поле та запустити той самий шлях, що й ручний пошук"""
        return self.start(term)
