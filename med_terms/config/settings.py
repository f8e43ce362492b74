"""
MedTerms — Налаштування системи

Всі параметри зібрані в dataclass-и для:
- Легкого доступу через config.backend.timeout_seconds
- Серіалізації в YAML
- Перевизначення через environment variables
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional
from enum import Enum
import os


# =============================================================================
# ENUMS
# =============================================================================

class PageLayout(str, Enum):
    """Розмітка сторінки Streamlit"""
    CENTERED = "centered"
    WIDE = "wide"


# =============================================================================
# BACKEND CONFIGURATION
# =============================================================================

DEFAULT_FUNCTION_NAME = "medical-terminology"
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass
class BackendConfig:
    """Підключення до backend-функції"""

    base_url: Optional[str] = None        # напр. https://<project>.supabase.co
    api_key: Optional[str] = None         # publishable (anon) key
    function_name: str = DEFAULT_FUNCTION_NAME
    functions_path: str = "/functions/v1"

    # Запит без таймауту може висіти безкінечно
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def is_configured(self) -> bool:
        return bool(self.base_url)

    def function_url(self, name: Optional[str] = None) -> str:
        """URL функції: {base_url}/functions/v1/{name}"""
        if not self.base_url:
            raise ValueError("Backend base_url is not configured")
        base = self.base_url.rstrip("/")
        path = "/" + self.functions_path.strip("/")
        return f"{base}{path}/{name or self.function_name}"


# =============================================================================
# UI CONFIGURATION
# =============================================================================

DEFAULT_EXAMPLE_TERMS = [
    "Tachycardia",
    "Hypertension",
    "MRI",
    "Anemia",
    "ECG",
    "Dermatology",
    "Arthritis",
    "Cardiology",
]


@dataclass
class UIConfig:
    """Параметри сторінки"""
    page_title: str = "Medical Terminology Assistant"
    page_icon: str = "❤️"
    layout: PageLayout = PageLayout.CENTERED
    placeholder: str = "e.g., Tachycardia, MRI, Hypertension..."
    example_terms: List[str] = field(default_factory=lambda: list(DEFAULT_EXAMPLE_TERMS))


# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

@dataclass
class MedTermsConfig:
    """
    Головна конфігурація MedTerms

    Приклад використання:
        config = MedTermsConfig.from_env()
        print(config.backend.function_name)  # medical-terminology
        print(config.ui.example_terms[0])    # Tachycardia
    """

    # Метадані
    version: str = "0.1.0"
    project_name: str = "MedTerms"

    # Компоненти
    backend: BackendConfig = field(default_factory=BackendConfig)
    ui: UIConfig = field(default_factory=UIConfig)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "MedTermsConfig":
        """Створити конфігурацію зі словника (напр. з YAML). Невідомі ключі ігноруються."""
        data = data or {}
        config = cls()

        for f in fields(cls):
            if f.name in ("backend", "ui") or f.name not in data:
                continue
            setattr(config, f.name, data[f.name])

        backend = data.get("backend") or {}
        for f in fields(BackendConfig):
            if f.name in backend:
                setattr(config.backend, f.name, backend[f.name])
        if backend.get("timeout_seconds") is not None:
            config.backend.timeout_seconds = float(backend["timeout_seconds"])

        ui = data.get("ui") or {}
        for f in fields(UIConfig):
            if f.name in ui:
                setattr(config.ui, f.name, ui[f.name])
        config.ui.layout = PageLayout(config.ui.layout)
        config.ui.example_terms = list(config.ui.example_terms)

        return config

    @classmethod
    def from_env(cls, path: Optional[str] = None) -> "MedTermsConfig":
        """
        Створити конфігурацію з environment variables.

        Порядок: значення за замовчуванням → YAML (path або MED_TERMS_CONFIG) → env.
        """
        path = path or os.getenv("MED_TERMS_CONFIG")
        if path:
            from .loader import load_config
            config = load_config(path)
        else:
            config = cls()

        backend = config.backend
        backend.base_url = os.getenv("SUPABASE_URL", backend.base_url)
        backend.api_key = (
            os.getenv("SUPABASE_PUBLISHABLE_KEY")
            or os.getenv("SUPABASE_ANON_KEY")
            or backend.api_key
        )
        backend.function_name = os.getenv("MED_TERMS_FUNCTION", backend.function_name)

        timeout = os.getenv("MED_TERMS_TIMEOUT")
        if timeout:
            backend.timeout_seconds = float(timeout)

        return config


# =============================================================================
# DEFAULT CONFIG INSTANCE
# =============================================================================

def get_default_config() -> MedTermsConfig:
    """Отримати конфігурацію за замовчуванням (без env)"""
    return MedTermsConfig()
