"""JSON Schema validation for daemon output, using the bundled v1 schemas."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema

SCHEMA_ROOT = Path(__file__).resolve().parent / "v1"
TX_RESPONSE_SCHEMA = "tx.response.schema.json"


class SchemaValidationError(ValueError):
    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


@lru_cache(maxsize=4)
def load_validator(schema_filename: str) -> jsonschema.Validator:
    """Load a bundled schema and build its validator (checked once per process)."""
    with (SCHEMA_ROOT / schema_filename).open("r", encoding="utf-8") as f:
        schema = json.load(f)
    validator_cls = jsonschema.validators.validator_for(schema)
    validator_cls.check_schema(schema)
    return validator_cls(schema)


def validate_instance(instance: Any, schema_filename: str) -> None:
    """
    Validate ``instance`` against a bundled schema.

    Raises:
        SchemaValidationError: With one ``path: message`` entry per problem
    """
    validator = load_validator(schema_filename)
    errors = sorted(
        validator.iter_errors(instance),
        key=lambda e: [str(part) for part in e.path],
    )
    if errors:
        raise SchemaValidationError(
            f"Schema validation failed for {schema_filename}.",
            errors=[_format_error(err) for err in errors],
        )


def _format_error(error: jsonschema.ValidationError) -> str:
    location = "/".join(str(part) for part in error.path) or "<root>"
    return f"{location}: {error.message}"
