"""Tests for document validation rules and the store validator."""
from __future__ import annotations

from model_catalog.model.diagnostic import Severity
from model_catalog.store import DataStore, write_json
from model_catalog.validation import validate_document, validate_file, validate_store
from model_catalog.validation.rules import (
    ALIAS_RULES,
    INDEX_RULES,
    PROVIDER_RULES,
    check_alias_not_self,
    check_aliases,
    check_models,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _provider(**overrides) -> dict:
    data = {
        "$schema": "../schema/model.schema.json",
        "provider": {"id": "openai", "name": "OpenAI"},
        "models": [{"id": "o3", "name": "o3", "tier": "max"}],
        "updated_at": "2025-01-01T00:00:00.000Z",
        "source": "models.dev",
    }
    data.update(overrides)
    return data


def _alias(**overrides) -> dict:
    data = {
        "provider": "proxy",
        "aliases": {"gpt-best": {"actual": "o3", "provider": "openai"}},
    }
    data.update(overrides)
    return data


def _index(**overrides) -> dict:
    data = {"version": "1.0.0", "updated_at": "t", "providers": ["openai"]}
    data.update(overrides)
    return data


def _messages(data, rules) -> list[str]:
    return [d.message for d in validate_document(data, rules) if d.is_error]


# ---------------------------------------------------------------------------
# Provider rules
# ---------------------------------------------------------------------------


class TestProviderRules:
    def test_valid(self) -> None:
        assert validate_document(_provider(), PROVIDER_RULES) == []

    def test_invalid_tier(self) -> None:
        data = _provider(models=[
            {"id": "a", "name": "A", "tier": "pro"},
            {"id": "b", "name": "B", "tier": "ultra"},
        ])
        assert _messages(data, PROVIDER_RULES) == ['models[1]: invalid tier "ultra"']

    def test_missing_updated_at_is_one_error(self) -> None:
        data = _provider()
        del data["updated_at"]
        assert _messages(data, PROVIDER_RULES) == ["Missing updated_at"]

    def test_missing_provider(self) -> None:
        data = _provider()
        del data["provider"]
        assert _messages(data, PROVIDER_RULES) == ["Missing provider.id", "Missing provider.name"]

    def test_empty_provider_name(self) -> None:
        data = _provider(provider={"id": "x", "name": ""})
        assert _messages(data, PROVIDER_RULES) == ["Missing provider.name"]

    def test_models_not_array(self) -> None:
        assert _messages(_provider(models={"o3": {}}), PROVIDER_RULES) == [
            "models must be an array"
        ]

    def test_model_missing_id_and_name(self) -> None:
        diags = check_models(_provider(models=[{"tier": "mini"}, "junk"]))
        assert [d.message for d in diags] == [
            "models[0]: missing id",
            "models[0]: missing name",
            "models[1]: missing id",
            "models[1]: missing name",
        ]

    def test_non_string_tier(self) -> None:
        data = _provider(models=[
            {"id": "a", "name": "A", "tier": ["max"]},
            {"id": "b", "name": "B", "tier": {"level": "max"}},
            {"id": "c", "name": "C", "tier": {}},
        ])
        assert _messages(data, PROVIDER_RULES) == [
            "models[0]: invalid tier \"['max']\"",
            "models[1]: invalid tier \"{'level': 'max'}\"",
        ]

    def test_tier_optional(self) -> None:
        assert check_models(_provider(models=[{"id": "a", "name": "A"}])) == []

    def test_non_object_document(self) -> None:
        assert len(_messages(["not", "a", "doc"], PROVIDER_RULES)) == 4


# ---------------------------------------------------------------------------
# Alias and index rules
# ---------------------------------------------------------------------------


class TestAliasRules:
    def test_valid(self) -> None:
        assert validate_document(_alias(), ALIAS_RULES) == []

    def test_missing_provider(self) -> None:
        assert _messages(_alias(provider=""), ALIAS_RULES) == ["Missing provider"]

    def test_aliases_must_be_object(self) -> None:
        assert _messages(_alias(aliases=["a"]), ALIAS_RULES) == ["aliases must be an object"]

    def test_entry_checks(self) -> None:
        diags = check_aliases(_alias(aliases={"a": "o3", "b": {"provider": "openai"}}))
        assert [d.message for d in diags] == [
            "aliases.a: must be an object",
            "aliases.b: missing actual",
        ]

    def test_self_reference_is_warning(self) -> None:
        data = _alias(aliases={"o3": {"actual": "o3"}})
        diags = check_alias_not_self(data)
        assert len(diags) == 1
        assert diags[0].severity is Severity.WARNING
        assert _messages(data, ALIAS_RULES) == []


class TestIndexRules:
    def test_valid(self) -> None:
        assert validate_document(_index(), INDEX_RULES) == []

    def test_all_missing(self) -> None:
        assert _messages({}, INDEX_RULES) == [
            "Missing version",
            "Missing updated_at",
            "providers must be an array",
        ]


# ---------------------------------------------------------------------------
# Files and the whole store
# ---------------------------------------------------------------------------


class TestValidateFile:
    def test_parse_error_is_single_error(self, tmp_path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        result = validate_file(path, PROVIDER_RULES)
        assert result.file == "broken.json"
        assert not result.valid
        assert len(result.errors) == 1
        assert result.errors[0].startswith("Parse error:")

    def test_missing_file(self, tmp_path) -> None:
        result = validate_file(tmp_path / "index.json", INDEX_RULES)
        assert not result.valid
        assert result.errors[0].startswith("Parse error:")


def _write_store(store: DataStore, provider: dict) -> None:
    write_json(store.providers_dir / "bad.json", provider)
    write_json(store.providers_dir / "good.json", _provider())
    write_json(store.aliases_dir / "proxy.json", _alias())
    write_json(store.index_path, _index())


class TestValidateStore:
    def test_reports_every_file(self, store) -> None:
        _write_store(store, _provider(models=[{"id": "x", "name": "X", "tier": "ultra"}]))
        report = validate_store(store)
        assert [r.file for r in report.results] == [
            "providers/bad.json",
            "providers/good.json",
            "aliases/proxy.json",
            "index.json",
        ]
        assert not report.ok
        assert [r.file for r in report.invalid] == ["providers/bad.json"]
        assert len(report.valid) == 3

    def test_unhashable_tier_reported_not_raised(self, store) -> None:
        _write_store(store, _provider(models=[{"id": "x", "name": "X", "tier": ["max"]}]))
        report = validate_store(store)
        assert [r.file for r in report.invalid] == ["providers/bad.json"]
        assert report.invalid[0].errors == ["models[0]: invalid tier \"['max']\""]

    def test_all_valid(self, store) -> None:
        _write_store(store, _provider())
        report = validate_store(store)
        assert report.ok
        assert report.warnings == []

    def test_missing_directories_warn(self, store) -> None:
        write_json(store.index_path, _index())
        report = validate_store(store)
        assert report.warnings == [
            "providers/ directory not found",
            "aliases/ directory not found",
        ]
        assert [r.file for r in report.results] == ["index.json"]
        assert report.ok

    def test_does_not_modify_files(self, store) -> None:
        _write_store(store, _provider(updated_at=None))
        before = {p: p.read_bytes() for p in store.root.rglob("*.json")}
        validate_store(store)
        assert {p: p.read_bytes() for p in store.root.rglob("*.json")} == before
