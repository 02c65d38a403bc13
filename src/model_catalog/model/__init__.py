"""Document types of the model store."""

from model_catalog.model.diagnostic import Diagnostic, FileResult, Severity
from model_catalog.model.types import (
    Capabilities,
    IndexDocument,
    IndexSources,
    Limits,
    Model,
    Pricing,
    ProviderDocument,
    ProviderInfo,
    Tier,
)

__all__ = [
    "Capabilities",
    "Diagnostic",
    "FileResult",
    "IndexDocument",
    "IndexSources",
    "Limits",
    "Model",
    "Pricing",
    "ProviderDocument",
    "ProviderInfo",
    "Severity",
    "Tier",
]
