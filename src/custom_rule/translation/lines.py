"""Built-in English messages used by the reference validation engine."""

from __future__ import annotations

from typing import Any

DEFAULT_LINES: dict[str, dict[str, Any]] = {
    "en": {
        "validation": {
            "required": "The :attribute field is required.",
            "type": "The :attribute field must be a valid :type.",
            "rule": "The :attribute field is invalid.",
        },
    },
}
