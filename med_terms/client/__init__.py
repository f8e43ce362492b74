"""
MedTerms — Віддалені виклики

- functions.py: FunctionsClient: HTTP-виклик іменованої функції
- terminology.py: TerminologyService: термін → пояснення
"""

from .functions import (
    FunctionsClient,
    FunctionsFetchError,
    FunctionsHttpError,
    FunctionsRelayError,
)
from .terminology import TerminologyService

__all__ = [
    "FunctionsClient",
    "FunctionsFetchError",
    "FunctionsHttpError",
    "FunctionsRelayError",
    "TerminologyService",
]
