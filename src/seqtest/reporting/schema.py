"""JSON schema definition for reporter output."""
from __future__ import annotations

SCHEMA_VERSION = "1.0.0"

JSON_SCHEMA_V1 = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "seqtest report",
    "type": "object",
    "required": ["schema_version", "generated_at", "summary", "cases"],
    "properties": {
        "schema_version": {"type": "string"},
        "generated_at": {"type": "string", "format": "date-time"},
        "summary": {
            "type": "object",
            "required": ["total", "passed", "failed", "assertion_failures", "errors", "duration_s", "success"],
            "properties": {
                "total": {"type": "integer"},
                "passed": {"type": "integer"},
                "failed": {"type": "integer"},
                "assertion_failures": {"type": "integer"},
                "errors": {"type": "integer"},
                "duration_s": {"type": "number"},
                "success": {"type": "boolean"},
            },
        },
        "cases": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["index", "group", "name", "status", "duration_ms"],
                "properties": {
                    "index": {"type": "integer", "minimum": 1},
                    "group": {"type": "string"},
                    "name": {"type": "string"},
                    "status": {"enum": ["passed", "failed"]},
                    "duration_ms": {"type": "number"},
                    "kind": {"enum": ["assertion", "error"]},
                    "reason": {"type": "string"},
                },
            },
        },
    },
}
