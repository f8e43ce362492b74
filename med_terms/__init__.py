"""
MedTerms — Medical Terminology Assistant

Сторінка, що пояснює медичні терміни простою мовою:
користувач вводить термін → запит до backend-функції → показуємо пояснення.

Модулі:
- config: Конфігурація (backend, UI)
- schemas: Pydantic моделі запиту/відповіді
- errors: Помилки валідації та запиту
- client: Виклик віддаленої функції (medical-terminology)
- web_ui: Streamlit сторінка
"""

__version__ = "0.1.0"

from .config import MedTermsConfig, get_default_config
from .errors import MedTermsError, ValidationError, RequestError
