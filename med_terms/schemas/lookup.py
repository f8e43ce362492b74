"""
MedTerms — Схеми запиту/відповіді

Pydantic моделі для:
- TermRequest: тіло запиту до backend-функції
- ExplanationResponse: відповідь backend-функції
- Notification: короткочасне повідомлення (toast) для користувача
"""

from enum import Enum
from pydantic import BaseModel, Field, field_validator


class TermRequest(BaseModel):
    """
    Тіло запиту до функції medical-terminology.

    Приклад:
        TermRequest(term="  Tachycardia ").model_dump()  # {"term": "Tachycardia"}
    """
    term: str = Field(..., description="Медичний термін (обрізаний, непорожній)")

    @field_validator('term')
    @classmethod
    def strip_term(cls, v: str) -> str:
        """Обрізаємо пробіли; порожній термін недопустимий"""
        v = v.strip()
        if not v:
            raise ValueError("term must not be empty")
        return v

    class Config:
        json_schema_extra = {
            "example": {"term": "Tachycardia"}
        }


class ExplanationResponse(BaseModel):
    """Відповідь функції: пояснення терміну простою мовою"""
    explanation: str = Field(..., min_length=1, description="Текст пояснення")

    class Config:
        json_schema_extra = {
            "example": {
                "explanation": "Tachycardia means a faster than normal heart rate..."
            }
        }


class NotificationVariant(str, Enum):
    """Стиль повідомлення"""
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


class Notification(BaseModel):
    """Toast-повідомлення"""
    title: str
    description: str = ""
    variant: NotificationVariant = NotificationVariant.DEFAULT

    @property
    def icon(self) -> str:
        return "⚠️" if self.variant == NotificationVariant.DESTRUCTIVE else "ℹ️"

    @property
    def text(self) -> str:
        """Текст для st.toast"""
        if self.description:
            return f"**{self.title}**  \n{self.description}"
        return f"**{self.title}**"
