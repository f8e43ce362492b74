"""MedTerms — Модуль конфігурації"""
from .settings import (
    MedTermsConfig,
    get_default_config,
    BackendConfig,
    UIConfig,
    PageLayout,
    DEFAULT_EXAMPLE_TERMS,
    DEFAULT_FUNCTION_NAME,
    DEFAULT_TIMEOUT_SECONDS,
)
from .loader import save_config, load_config, save_yaml, load_yaml

__all__ = [
    "MedTermsConfig",
    "get_default_config",
    "BackendConfig",
    "UIConfig",
    "PageLayout",
    "DEFAULT_EXAMPLE_TERMS",
    "DEFAULT_FUNCTION_NAME",
    "DEFAULT_TIMEOUT_SECONDS",
    "save_config",
    "load_config",
    "save_yaml",
    "load_yaml",
]
