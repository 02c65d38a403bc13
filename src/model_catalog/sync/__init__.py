"""Synchronization of the store from the models.dev catalog."""

from model_catalog.sync.convert import convert_model
from model_catalog.sync.merge import merge_models
from model_catalog.sync.ordering import sort_models
from model_catalog.sync.pipeline import SyncReport, fetch_catalog, sync_catalog
from model_catalog.sync.simplify import simplify_models
from model_catalog.sync.tiers import infer_tier

__all__ = [
    "SyncReport",
    "convert_model",
    "fetch_catalog",
    "infer_tier",
    "merge_models",
    "simplify_models",
    "sort_models",
    "sync_catalog",
]
