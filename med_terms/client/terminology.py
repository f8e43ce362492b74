"""
MedTerms — Сервіс пояснення термінів

Єдиний віддалений виклик: термін → пояснення.
"""

from typing import Optional

from pydantic import ValidationError as SchemaError

from ..config import MedTermsConfig
from ..errors import RequestError, ValidationError
from ..schemas import ExplanationResponse, TermRequest
from .functions import FunctionsClient


class TerminologyService:
    """
    Адаптер функції medical-terminology.

    Приклад:
        service = TerminologyService.from_config(MedTermsConfig.from_env())
        text = service.explain("Tachycardia")
    """

    def __init__(self, client: FunctionsClient, function_name: Optional[str] = None):
        self.client = client
        self.function_name = function_name or client.config.function_name

    @classmethod
    def from_config(cls, config: MedTermsConfig) -> "TerminologyService":
        return cls(FunctionsClient(config.backend))

    def explain(self, term: str) -> str:
        """
        Отримати пояснення терміну.

        Raises:
            ValidationError: термін порожній після обрізання пробілів
            RequestError: невдалий виклик або відповідь без explanation
        """
        try:
            request = TermRequest(term=term)
        except SchemaError as e:
            raise ValidationError("Term must not be empty") from e

        try:
            data = self.client.invoke(self.function_name, request.model_dump())
        except RequestError as e:
            print(f"❌ Edge function error: {e}")
            raise

        try:
            response = ExplanationResponse.model_validate(data)
        except SchemaError as e:
            print(f"❌ Error fetching explanation: {e}")
            raise RequestError("No explanation received") from e

        return response.explanation

    def close(self) -> None:
        self.client.close()
