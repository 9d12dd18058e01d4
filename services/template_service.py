"""
Rendering of the merged deployment template.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping

import yaml

SUPPORTED_FORMATS = ("json", "yaml")


def prune_empty_values(value: Any) -> Any:
    """Drop None-valued keys; CloudFormation treats them as invalid, not absent."""

    if isinstance(value, Mapping):
        return {
            key: prune_empty_values(item)
            for key, item in value.items()
            if item is not None
        }
    if isinstance(value, list):
        return [prune_empty_values(item) for item in value]
    return value


def resources_section(service: Mapping[str, Any]) -> Dict[str, Any]:
    resources = service.get("resources") or {}
    return dict(resources.get("Resources") or {})


def render_template(template: Mapping[str, Any], output_format: str = "json") -> str:
    if output_format not in SUPPORTED_FORMATS:
        raise ValueError(
            f"Unknown output format '{output_format}'. Use one of: {', '.join(SUPPORTED_FORMATS)}."
        )
    payload = prune_empty_values(template)
    if output_format == "yaml":
        return yaml.safe_dump(payload, sort_keys=False, default_flow_style=False)
    return json.dumps(payload, indent=2, default=str)
