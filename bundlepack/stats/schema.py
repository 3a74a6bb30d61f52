"""JSON schema and validation for bundler stats files."""

from __future__ import annotations

from typing import Any

from jsonschema import Draft202012Validator

from bundlepack.stats.exceptions import StatsValidationError

STATS_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Bundler stats",
    "type": "object",
    "required": ["assets"],
    "additionalProperties": True,
    "properties": {
        "assets": {
            "type": "array",
            "items": {"$ref": "#/$defs/asset"},
        },
        "chunks": {
            "type": "array",
            "items": {
                "type": "object",
                "additionalProperties": True,
                "properties": {
                    "modules": {
                        "type": "array",
                        "items": {"$ref": "#/$defs/module"},
                    },
                },
            },
        },
        "modules": {
            "type": "array",
            "items": {"$ref": "#/$defs/module"},
        },
    },
    "$defs": {
        "asset": {
            "type": "object",
            "required": ["name", "size"],
            "additionalProperties": True,
            "properties": {
                "name": {"type": "string", "minLength": 1},
                "size": {"type": "integer", "minimum": 0},
                "gzipSize": {"type": "integer", "minimum": 0},
            },
        },
        "module": {
            "type": "object",
            "required": ["name", "size"],
            "additionalProperties": True,
            "properties": {
                "name": {"type": "string", "minLength": 1},
                "size": {"type": "integer", "minimum": 0},
                "modules": {
                    "type": "array",
                    "items": {"$ref": "#/$defs/module"},
                },
            },
        },
    },
}

_VALIDATOR = Draft202012Validator(STATS_SCHEMA)


def validate_stats(payload: Any) -> None:
    errors = sorted(_VALIDATOR.iter_errors(payload), key=lambda err: list(err.path))
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.path) or "$"
        raise StatsValidationError(f"Invalid stats at {location}: {first.message}")
