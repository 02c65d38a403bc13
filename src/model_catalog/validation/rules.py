"""Validation rules for store documents.

Each rule is a function taking a decoded JSON document and returning a list
of Diagnostic objects describing any issues found. Rules never raise on
unexpected shapes; a value of the wrong type counts as missing.
"""

from __future__ import annotations

from typing import Any, Callable

from model_catalog.model.diagnostic import Diagnostic, Severity
from model_catalog.model.types import Tier

Rule = Callable[[Any], list[Diagnostic]]

VALID_TIERS = frozenset(t.value for t in Tier)


def _get(data: Any, key: str) -> Any:
    return data.get(key) if isinstance(data, dict) else None


def _error(rule: str, message: str) -> Diagnostic:
    return Diagnostic(rule=rule, severity=Severity.ERROR, message=message)


def _require(rule: str, value: Any, message: str) -> list[Diagnostic]:
    return [] if value else [_error(rule, message)]


# ---------------------------------------------------------------------------
# Provider documents
# ---------------------------------------------------------------------------


def check_provider_id(data: Any) -> list[Diagnostic]:
    return _require("check_provider_id", _get(_get(data, "provider"), "id"), "Missing provider.id")


def check_provider_name(data: Any) -> list[Diagnostic]:
    return _require(
        "check_provider_name", _get(_get(data, "provider"), "name"), "Missing provider.name"
    )


def check_models(data: Any) -> list[Diagnostic]:
    """``models`` must be an array whose entries have an id, a name and a known tier."""
    models = _get(data, "models")
    if not isinstance(models, list):
        return [_error("check_models", "models must be an array")]
    diagnostics: list[Diagnostic] = []
    for i, model in enumerate(models):
        if not _get(model, "id"):
            diagnostics.append(_error("check_models", f"models[{i}]: missing id"))
        if not _get(model, "name"):
            diagnostics.append(_error("check_models", f"models[{i}]: missing name"))
        tier = _get(model, "tier")
        if tier and (not isinstance(tier, str) or tier not in VALID_TIERS):
            diagnostics.append(_error("check_models", f'models[{i}]: invalid tier "{tier}"'))
    return diagnostics


def check_updated_at(data: Any) -> list[Diagnostic]:
    return _require("check_updated_at", _get(data, "updated_at"), "Missing updated_at")


# ---------------------------------------------------------------------------
# Alias documents
# ---------------------------------------------------------------------------


def check_alias_provider(data: Any) -> list[Diagnostic]:
    return _require("check_alias_provider", _get(data, "provider"), "Missing provider")


def check_aliases(data: Any) -> list[Diagnostic]:
    """``aliases`` must map each alias name to an object with an ``actual`` model."""
    aliases = _get(data, "aliases")
    if not isinstance(aliases, dict):
        return [_error("check_aliases", "aliases must be an object")]
    diagnostics: list[Diagnostic] = []
    for alias, mapping in aliases.items():
        if not isinstance(mapping, dict):
            diagnostics.append(_error("check_aliases", f"aliases.{alias}: must be an object"))
        elif not mapping.get("actual"):
            diagnostics.append(_error("check_aliases", f"aliases.{alias}: missing actual"))
    return diagnostics


def check_alias_not_self(data: Any) -> list[Diagnostic]:
    """An alias that maps to its own name is pointless; reported as a warning."""
    aliases = _get(data, "aliases")
    if not isinstance(aliases, dict):
        return []
    return [
        Diagnostic(
            rule="check_alias_not_self",
            severity=Severity.WARNING,
            message=f"aliases.{alias}: maps to itself",
        )
        for alias, mapping in aliases.items()
        if _get(mapping, "actual") == alias
    ]


# ---------------------------------------------------------------------------
# Index document
# ---------------------------------------------------------------------------


def check_index_version(data: Any) -> list[Diagnostic]:
    return _require("check_index_version", _get(data, "version"), "Missing version")


def check_index_providers(data: Any) -> list[Diagnostic]:
    if isinstance(_get(data, "providers"), list):
        return []
    return [_error("check_index_providers", "providers must be an array")]


PROVIDER_RULES: list[Rule] = [
    check_provider_id,
    check_provider_name,
    check_models,
    check_updated_at,
]

ALIAS_RULES: list[Rule] = [
    check_alias_provider,
    check_aliases,
    check_alias_not_self,
]

INDEX_RULES: list[Rule] = [
    check_index_version,
    check_updated_at,
    check_index_providers,
]
