"""Structlog processor that nests deployer log events into a fixed schema.

Flat event_dict keys are moved into blocks:
- root: timestamp, level, service, environment, message
- error: error_type, error_details
- context: context_component
- scale: deployment_id, desired_instance_count, deployer
Anything left over ends up in ``extra``.
All field extraction uses dict.pop(key, default) so missing keys never raise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def _safe_int(value: Any) -> int | None:
    """Cast a value to int, returning None on failure."""
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _build_error(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    error_type = event_dict.pop("error_type", None)
    if error_type is None:
        return None
    return {
        "type": error_type,
        "details": event_dict.pop("error_details", None),
    }


def _build_context(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    component = event_dict.pop("context_component", None)
    if component is None:
        return None
    return {"component": component}


def _build_scale(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract the scale request block. Returns None if no scale fields are present."""
    if "deployment_id" not in event_dict and "desired_instance_count" not in event_dict:
        return None
    return {
        "deployment_id": event_dict.pop("deployment_id", None),
        "desired_instance_count": _safe_int(event_dict.pop("desired_instance_count", None)),
        "deployer": event_dict.pop("deployer", None),
    }


@dataclass(frozen=True, slots=True)
class DeployerSchemaProcessor:
    service: str
    environment: str

    def __call__(
        self,
        logger: Any,  # noqa: ARG002
        method_name: str,  # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        result: dict[str, Any] = {
            "timestamp": event_dict.pop("timestamp", None),
            "level": event_dict.pop("level", "info"),
            "service": self.service,
            "environment": self.environment,
            "message": event_dict.pop("event", ""),
        }

        error = _build_error(event_dict)
        if error is not None:
            result["error"] = error

        context = _build_context(event_dict)
        if context is not None:
            result["context"] = context

        scale = _build_scale(event_dict)
        if scale is not None:
            result["scale"] = scale

        if event_dict:
            result["extra"] = dict(event_dict)

        return result
