"""
MedTerms — Помилки

Дві категорії помилок:
- ValidationError: порожній термін (до виклику backend)
- RequestError: будь-яка невдача виклику backend, включно з некоректною відповіддю
"""


class MedTermsError(Exception):
    """Базова помилка MedTerms"""


class ValidationError(MedTermsError):
    """Некоректний ввід користувача"""


class RequestError(MedTermsError):
    """Невдалий запит до backend-функції"""
