"""
MedTerms — Клієнт backend-функцій

Виклик іменованої функції по HTTP:
    POST {base_url}/functions/v1/{name}
    Authorization: Bearer <api_key>
    apikey: <api_key>
    body: JSON

Помилки (всі є RequestError):
- FunctionsFetchError: мережа, таймаут, некоректний JSON у відповіді
- FunctionsRelayError: помилка шлюзу (заголовок x-relay-error)
- FunctionsHttpError: функція повернула не-2xx статус
"""

from typing import Any, Dict, Optional

import requests

from ..config import BackendConfig
from ..errors import RequestError


class FunctionsFetchError(RequestError):
    """Не вдалося виконати запит або розібрати відповідь"""


class FunctionsRelayError(RequestError):
    """Шлюз не зміг передати запит функції"""


class FunctionsHttpError(RequestError):
    """Функція повернула помилковий статус"""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class FunctionsClient:
    """
    HTTP-клієнт для іменованих backend-функцій.

    Приклад:
        with FunctionsClient(config.backend) as client:
            data = client.invoke("medical-terminology", {"term": "MRI"})
    """

    def __init__(self, config: BackendConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"
            headers["apikey"] = self.config.api_key
        return headers

    def invoke(self, name: str, body: Dict[str, Any]) -> Any:
        """Викликати функцію та повернути розібраний JSON"""
        if not self.config.is_configured:
            raise FunctionsFetchError("Backend URL is not configured")

        url = self.config.function_url(name)

        try:
            r = self.session.post(
                url,
                json=body,
                headers=self._headers(),
                timeout=self.config.timeout_seconds,
            )
        except requests.RequestException as e:
            raise FunctionsFetchError(f"Failed to send a request to {name}: {e}") from e

        if r.headers.get("x-relay-error", "").lower() == "true":
            raise FunctionsRelayError(f"Relay error while calling {name}")

        if not 200 <= r.status_code < 300:
            raise FunctionsHttpError(
                f"Function {name} returned status {r.status_code}",
                status_code=r.status_code,
            )

        try:
            return r.json()
        except ValueError as e:
            raise FunctionsFetchError(f"Function {name} returned invalid JSON") from e

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "FunctionsClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
