"""Structural validation of store documents."""

from model_catalog.validation.validator import (
    StoreReport,
    validate_document,
    validate_file,
    validate_store,
)

__all__ = ["StoreReport", "validate_document", "validate_file", "validate_store"]
