"""
Structural validation of workflow configuration before resource generation.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Sequence

from pydantic import ValidationError

from glueflow.ir.spec_schema import WorkflowSpec

LOGGER = logging.getLogger(__name__)

_REQUIRED_CRAWLER_FIELDS = ("role", "targets", "databaseName")


class ConfigurationError(ValueError):
    """Raised when workflow configuration is incomplete or malformed."""


def validate_workflow_configurations(
    workflows: Optional[Mapping[str, Any]],
) -> None:
    """
    Validate every workflow in declaration order, stopping at the first problem.

    An empty or missing map is valid: there is simply nothing to generate.
    """

    if not workflows:
        LOGGER.info("No Glue Workflows configurations found.")
        return

    for workflow_name, workflow in workflows.items():
        validate_workflow(workflow_name, workflow)


def validate_workflow(workflow_name: str, workflow: Mapping[str, Any]) -> None:
    if not isinstance(workflow, Mapping):
        raise ConfigurationError(f"Workflow {workflow_name} must be a mapping")

    if not workflow.get("description"):
        raise ConfigurationError(f"Workflow {workflow_name} is missing description")

    if not workflow.get("jobs"):
        raise ConfigurationError(
            f"Workflow {workflow_name} must have at least one job defined"
        )

    if workflow.get("crawlers") is not None:
        validate_crawlers(workflow_name, workflow["crawlers"])


def validate_crawlers(workflow_name: str, crawlers: Sequence[Mapping[str, Any]]) -> None:
    for index, crawler in enumerate(crawlers):
        if not isinstance(crawler, Mapping):
            crawler = {}
        crawler_name = crawler.get("name")
        if not crawler_name:
            raise ConfigurationError(
                f"Crawler at index {index} in workflow {workflow_name} is missing name"
            )
        for field in _REQUIRED_CRAWLER_FIELDS:
            if not crawler.get(field):
                raise ConfigurationError(
                    f"Crawler {crawler_name} in workflow {workflow_name} is missing {field}"
                )


def parse_workflows(workflows: Optional[Mapping[str, Any]]) -> Dict[str, WorkflowSpec]:
    """Convert validated raw configuration into typed workflow specs."""

    parsed: Dict[str, WorkflowSpec] = {}
    for workflow_name, workflow in (workflows or {}).items():
        if isinstance(workflow, WorkflowSpec):
            parsed[workflow_name] = workflow
            continue
        try:
            parsed[workflow_name] = WorkflowSpec.model_validate(dict(workflow))
        except ValidationError as exc:
            raise ConfigurationError(
                f"Workflow {workflow_name} has an invalid definition: {exc}"
            ) from exc
    return parsed
