"""Schema validation of CFF documents against versioned JSON Schemas."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Protocol

import structlog
from jsonschema import Draft7Validator
from jsonschema.exceptions import ValidationError as SchemaValidationError

from cffkit.errors import ValidationError
from cffkit.fields import DEFAULT_SPEC_VERSION, LICENSES
from cffkit.settings import get_settings

logger = structlog.get_logger(__name__)

BUNDLED_SCHEMA_DIR = Path(__file__).parent / "schemas"


def with_spdx_licenses(schema: dict[str, Any]) -> dict[str, Any]:
    """Fill the schema's ``license-enum`` definition from the SPDX License List."""
    definitions = schema.get("definitions", {})
    if "license-enum" in definitions:
        definitions["license-enum"] = {"type": "string", "enum": sorted(LICENSES)}
    return schema


class Validatable(Protocol):
    def to_fields(self) -> dict[str, Any]:
        ...


@dataclass(slots=True)
class ValidationIssue:
    """One schema failure: where it happened and which keyword failed."""

    message: str
    path: tuple[str | int, ...] = ()
    keyword: str = ""

    @classmethod
    def from_schema_error(cls, error: SchemaValidationError) -> ValidationIssue:
        return cls(
            message=error.message,
            path=tuple(error.absolute_path),
            keyword=str(error.validator),
        )

    @property
    def location(self) -> str:
        return "/".join(str(part) for part in self.path) or "#"

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"


@dataclass(slots=True)
class ValidationResult:
    """Outcome of validating one document. Unpacks as ``(ok, errors)``."""

    ok: bool
    errors: list[ValidationIssue] = field(default_factory=list)
    version: str = ""

    def __iter__(self) -> Iterator[Any]:
        yield self.ok
        yield self.errors

    def __bool__(self) -> bool:
        return self.ok

    def raise_for_errors(self, invalid_filename: bool = False) -> None:
        if not self.ok or invalid_filename:
            raise ValidationError(self.errors, invalid_filename=invalid_filename)


class SchemaRegistry:
    """JSON Schemas keyed by ``cff-version``."""

    def __init__(
        self,
        schemas: Mapping[str, Mapping[str, Any]] | None = None,
        default_version: str = DEFAULT_SPEC_VERSION,
    ) -> None:
        self._validators: dict[str, Draft7Validator] = {}
        self.default_version = default_version
        for version, schema in (schemas or {}).items():
            self.register(version, schema)

    def register(self, version: str, schema: Mapping[str, Any]) -> None:
        Draft7Validator.check_schema(schema)
        if version in self._validators:
            logger.info("schemas.replace", version=version)
        self._validators[version] = Draft7Validator(schema)

    def load_directory(self, directory: Path) -> None:
        """Register every ``<version>.json`` file found in ``directory``."""
        for path in sorted(directory.glob("*.json")):
            schema = json.loads(path.read_text(encoding="utf-8"))
            self.register(path.stem, with_spdx_licenses(schema))
            logger.debug("schemas.loaded", version=path.stem, path=str(path))

    def validator_for(self, version: str) -> Draft7Validator | None:
        return self._validators.get(version)

    def versions(self) -> list[str]:
        return sorted(self._validators)

    def __contains__(self, version: object) -> bool:
        return version in self._validators

    def resolve(self, *candidates: str | None) -> str:
        """Pick the first known version from ``candidates``, else the default."""
        for candidate in candidates:
            if candidate and candidate in self._validators:
                return candidate
        return self.default_version


class Validator:
    """Validates documents against the schema matching their version."""

    def __init__(self, registry: SchemaRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> SchemaRegistry:
        return self._registry

    def validate(
        self,
        document: Validatable,
        fail_fast: bool = False,
        validate_as: str | None = None,
    ) -> ValidationResult:
        fields = document.to_fields()
        own_version = fields.get("cff-version")
        version = self._registry.resolve(validate_as, str(own_version) if own_version else None)
        schema_validator = self._registry.validator_for(version)
        if schema_validator is None:
            raise LookupError(f"no schema registered for cff-version {version}")

        issues = self._collect(schema_validator.iter_errors(fields), fail_fast)
        logger.debug("validation.complete", version=version, ok=not issues, errors=len(issues))
        return ValidationResult(ok=not issues, errors=issues, version=version)

    def validate_or_raise(
        self,
        document: Validatable,
        fail_fast: bool = False,
        validate_as: str | None = None,
    ) -> None:
        self.validate(document, fail_fast=fail_fast, validate_as=validate_as).raise_for_errors()

    @staticmethod
    def _collect(errors: Iterable[SchemaValidationError], fail_fast: bool) -> list[ValidationIssue]:
        if fail_fast:
            first = next(iter(errors), None)
            return [] if first is None else [ValidationIssue.from_schema_error(first)]
        ordered = sorted(errors, key=lambda error: [str(part) for part in error.absolute_path])
        return [ValidationIssue.from_schema_error(error) for error in ordered]


def build_schema_registry(extra_dir: Path | None = None) -> SchemaRegistry:
    """Registry with the bundled schemas plus any found in ``extra_dir``."""
    registry = SchemaRegistry()
    registry.load_directory(BUNDLED_SCHEMA_DIR)
    if extra_dir is not None and extra_dir.is_dir():
        registry.load_directory(extra_dir)
    return registry


@lru_cache(maxsize=1)
def get_default_validator() -> Validator:
    return Validator(build_schema_registry(get_settings().schema_dir))
