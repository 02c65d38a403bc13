"""model_catalog: static AI-model metadata store with sync and validation tools."""

__version__ = "0.1.0"
