"""
Тести для модуля web_ui (стан сторінки та контролер пошуку)

Запуск: pytest tests/test_web_ui.py -v
Або демо: python tests/test_web_ui.py
"""

import pytest

from med_terms.errors import RequestError


class FakeService:
    """Записує терміни та стан loading під час виклику"""

    def __init__(self, explanation="A fast heart rate.", error=None, state=None):
        self.explanation = explanation
        self.error = error
        self.state = state
        self.calls = []
        self.loading_during_call = []

    def explain(self, term):
        self.calls.append(term)
        if self.state is not None:
            self.loading_during_call.append(self.state.is_loading)
        if self.error is not None:
            raise self.error
        return self.explanation


def _controller(**kwargs):
    from med_terms.web_ui import PageState, SearchController

    state = PageState()
    service = FakeService(state=state, **kwargs)
    return SearchController(state, service), service


# =============================================================================
# Валідація
# =============================================================================

@pytest.mark.parametrize("term", ["", "   ", "\t\n "])
def test_empty_term_never_calls_backend(term):
    """Порожній термін: попередження, без виклику backend"""
    from med_terms.web_ui import EMPTY_TERM_NOTICE, SearchPhase

    controller, service = _controller()

    assert controller.submit(term) is False
    assert service.calls == []
    assert controller.state.is_loading is False
    assert controller.state.phase == SearchPhase.IDLE
    assert controller.pop_notifications() == [EMPTY_TERM_NOTICE]

    print(f"✓ Empty term {term!r}: warning shown")


def test_empty_term_keeps_previous_explanation():
    controller, _ = _controller()
    controller.submit("MRI")

    controller.submit("   ")

    assert controller.state.explanation == "A fast heart rate."


# =============================================================================
# Успішний запит
# =============================================================================

def test_submit_calls_backend_once_with_trimmed_term():
    from med_terms.web_ui import SearchPhase

    controller, service = _controller(explanation="Magnetic resonance imaging...")

    assert controller.submit("  MRI  ") is True

    assert service.calls == ["MRI"]
    assert controller.state.explanation == "Magnetic resonance imaging..."
    assert controller.state.submitted_term == "MRI"
    assert controller.state.term == "  MRI  "
    assert controller.state.phase == SearchPhase.RESULT
    assert controller.pop_notifications() == []

    print(f"✓ Submit: {controller.state.submitted_term} → {controller.state.explanation}")


def test_loading_only_during_request():
    """loading=True строго між submit та відповіддю"""
    controller, service = _controller()

    assert controller.state.is_loading is False
    controller.submit("Anemia")

    assert service.loading_during_call == [True]
    assert controller.state.is_loading is False
    assert controller.state.pending_term is None


def test_start_then_complete():
    """Двокроковий шлях, яким користується сторінка"""
    from med_terms.web_ui import SearchPhase

    controller, service = _controller()
    controller.submit("ECG")

    assert controller.start("Hypertension") is True
    assert controller.state.is_loading is True
    assert controller.state.explanation == ""
    assert controller.state.phase == SearchPhase.LOADING
    assert controller.state.show_examples is False
    assert service.calls == ["ECG"]

    assert controller.complete() is True
    assert service.calls == ["ECG", "Hypertension"]
    assert controller.state.is_loading is False


def test_submit_while_loading_is_ignored():
    controller, service = _controller()

    assert controller.start("Anemia") is True
    assert controller.start("ECG") is False
    assert controller.submit("ECG") is False

    assert controller.state.term == "Anemia"
    controller.complete()
    assert service.calls == ["Anemia"]


def test_complete_without_start_does_nothing():
    controller, service = _controller()

    assert controller.complete() is False
    assert service.calls == []


def test_submit_uses_current_term():
    controller, service = _controller()
    controller.set_term("Arthritis ")

    controller.submit()

    assert service.calls == ["Arthritis"]


# =============================================================================
# Помилки
# =============================================================================

def test_request_error_shows_notification():
    """Невдалий запит: повідомлення, пояснення порожнє, loading=False"""
    from med_terms.web_ui import FETCH_FAILED_NOTICE, SearchPhase

    controller, service = _controller(error=RequestError("No explanation received"))

    assert controller.submit("Dermatology") is False

    assert service.loading_during_call == [True]
    assert controller.state.explanation == ""
    assert controller.state.is_loading is False
    assert controller.state.phase == SearchPhase.IDLE
    assert controller.pop_notifications() == [FETCH_FAILED_NOTICE]
    assert controller.pop_notifications() == []

    print("✓ Request error: notification shown, loading cleared")


def test_failure_clears_previous_explanation():
    controller, service = _controller()
    controller.submit("Cardiology")
    assert controller.state.explanation

    service.error = RequestError("boom")
    controller.submit("Cardiology")

    assert controller.state.explanation == ""
    assert controller.state.show_examples is True


def test_unexpected_error_still_clears_loading():
    controller, _ = _controller(error=RuntimeError("bug"))

    with pytest.raises(RuntimeError):
        controller.submit("MRI")

    assert controller.state.is_loading is False


def test_retry_after_failure():
    controller, service = _controller(error=RequestError("timeout"))
    controller.submit("MRI")

    service.error = None
    assert controller.submit("MRI") is True
    assert controller.state.explanation == "A fast heart rate."


# =============================================================================
# Приклади
# =============================================================================

def test_example_terms():
    from med_terms.web_ui import EXAMPLE_TERMS

    assert EXAMPLE_TERMS == (
        "Tachycardia", "Hypertension", "MRI", "Anemia",
        "ECG", "Dermatology", "Arthritis", "Cardiology",
    )


def test_select_example_uses_submit_path():
    """Клік по прикладу заповнює поле та запускає той самий шлях"""
    controller, service = _controller()
    controller.set_term("something else")

    assert controller.select_example("Tachycardia") is True
    assert controller.state.term == "Tachycardia"
    assert controller.state.is_loading is True

    controller.complete()

    assert service.calls == ["Tachycardia"]
    assert controller.state.submitted_term == "Tachycardia"
    assert controller.state.explanation == "A fast heart rate."

    print("✓ Example: Tachycardia")


def test_examples_visibility():
    controller, _ = _controller()
    assert controller.state.show_examples is True

    controller.start("MRI")
    assert controller.state.show_examples is False

    controller.complete()
    assert controller.state.show_examples is False


def demo():
    print("=" * 60)
    print("MedTerms — Тест сторінки")
    print("=" * 60)

    test_empty_term_never_calls_backend("   ")
    test_submit_calls_backend_once_with_trimmed_term()
    test_request_error_shows_notification()
    test_select_example_uses_submit_path()

    print("\n✅ Всі тести пройдено успішно!")


if __name__ == "__main__":
    demo()
