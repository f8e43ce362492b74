"""
MedTerms — Модуль схем даних (schemas)

Pydantic моделі для валідації та серіалізації даних.

Приклад використання:
    from med_terms.schemas import TermRequest, ExplanationResponse

    body = TermRequest(term=" MRI ").model_dump()        # {"term": "MRI"}
    reply = ExplanationResponse.model_validate(data)     # ValidationError якщо немає explanation
"""

from .lookup import (
    TermRequest,
    ExplanationResponse,
    Notification,
    NotificationVariant,
)

__all__ = [
    "TermRequest",
    "ExplanationResponse",
    "Notification",
    "NotificationVariant",
]
