"""
Loading of service files and extraction of the `custom.glueWorkflows` section.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from glueflow.ir.validators import ConfigurationError

LOGGER = logging.getLogger(__name__)

YAML_SUFFIXES = {".yml", ".yaml"}
JSON_SUFFIXES = {".json"}


class _ServiceFileLoader(yaml.SafeLoader):
    """SafeLoader that understands CloudFormation short-form tags (`!Ref`, `!GetAtt`, ...)."""


def _construct_intrinsic(loader: yaml.SafeLoader, tag_suffix: str, node: yaml.Node) -> Dict[str, Any]:
    if isinstance(node, yaml.ScalarNode):
        value: Any = loader.construct_scalar(node)
    elif isinstance(node, yaml.SequenceNode):
        value = loader.construct_sequence(node, deep=True)
    else:
        value = loader.construct_mapping(node, deep=True)

    if tag_suffix == "Ref":
        return {"Ref": value}
    if tag_suffix == "GetAtt" and isinstance(value, str):
        return {"Fn::GetAtt": value.split(".", 1)}
    return {f"Fn::{tag_suffix}": value}


_ServiceFileLoader.add_multi_constructor("!", _construct_intrinsic)


def load_service_config(path: Union[str, Path]) -> Dict[str, Any]:
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigurationError(f"Service configuration not found: {config_path}")

    suffix = config_path.suffix.lower()
    raw = config_path.read_text(encoding="utf-8")
    try:
        if suffix in YAML_SUFFIXES:
            data = yaml.load(raw, Loader=_ServiceFileLoader)
        elif suffix in JSON_SUFFIXES:
            data = json.loads(raw)
        else:
            raise ConfigurationError(
                f"Unsupported service configuration format: {config_path.suffix}"
            )
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigurationError(
            f"Could not parse service configuration {config_path}: {exc}"
        ) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Service configuration root must be a mapping, got {type(data).__name__}"
        )
    LOGGER.debug("Loaded service configuration from %s", config_path)
    return data


def extract_glue_workflows(service: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    custom = (service or {}).get("custom") or {}
    workflows = custom.get("glueWorkflows") or {}
    if not isinstance(workflows, Mapping):
        raise ConfigurationError("custom.glueWorkflows must be a mapping of workflow names")
    return dict(workflows)


def load_glue_workflows(path: Union[str, Path]) -> Dict[str, Any]:
    return extract_glue_workflows(load_service_config(path))
