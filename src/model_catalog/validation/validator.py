"""Store validator: runs the document rules over every file and reports results."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from model_catalog.model.diagnostic import Diagnostic, FileResult, Severity
from model_catalog.store import DataStore, read_json
from model_catalog.validation.rules import (
    ALIAS_RULES,
    INDEX_RULES,
    PROVIDER_RULES,
    Rule,
)


@dataclass
class StoreReport:
    """Results for every file checked, plus store-level warnings."""

    results: list[FileResult] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def valid(self) -> list[FileResult]:
        return [r for r in self.results if r.valid]

    @property
    def invalid(self) -> list[FileResult]:
        return [r for r in self.results if not r.valid]

    @property
    def ok(self) -> bool:
        return not self.invalid


def validate_document(data: object, rules: list[Rule]) -> list[Diagnostic]:
    """Run *rules* against an already decoded document."""
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(data))
    return diagnostics


def validate_file(path: Path, rules: list[Rule], name: str | None = None) -> FileResult:
    """Read *path* and validate it; read or parse failures become one error."""
    result = FileResult(file=name or path.name)
    try:
        data = read_json(path)
    except (OSError, ValueError) as exc:
        result.diagnostics.append(
            Diagnostic(rule="parse", severity=Severity.ERROR, message=f"Parse error: {exc}")
        )
        return result
    result.diagnostics.extend(validate_document(data, rules))
    return result


def validate_store(store: DataStore) -> StoreReport:
    """Validate provider, alias and index documents, in that order.

    Every file is checked; an invalid file never stops the run.
    """
    report = StoreReport()
    for directory, files, rules in (
        (store.providers_dir, store.provider_files(), PROVIDER_RULES),
        (store.aliases_dir, store.alias_files(), ALIAS_RULES),
    ):
        if files is None:
            report.warnings.append(f"{store.relative(directory)}/ directory not found")
            continue
        for path in files:
            report.results.append(validate_file(path, rules, store.relative(path)))

    report.results.append(
        validate_file(store.index_path, INDEX_RULES, store.relative(store.index_path))
    )
    return report
