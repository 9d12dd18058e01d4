"""
Aggregates workflow, crawler and job resources into one CloudFormation map.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, MutableMapping, Optional

from glueflow.compiler.crawler_resources import build_crawler_resources
from glueflow.compiler.job_resources import build_job_resources
from glueflow.ir.identifiers import WORKFLOW_RESOURCE_TYPE, workflow_logical_id
from glueflow.ir.spec_schema import (
    Resource,
    WorkflowInput,
    WorkflowSpec,
    as_workflow_spec,
    make_resource,
)

LOGGER = logging.getLogger(__name__)


class ResourceGenerator:
    def generate(
        self, workflows: Optional[Mapping[str, WorkflowInput]]
    ) -> Dict[str, Resource]:
        """
        Build every resource for `workflows`, in declaration order.

        Each workflow contributes its own resource first, then its crawlers
        (with the first crawler's triggers) and finally its jobs with their
        sequencing triggers.
        """

        resources: Dict[str, Resource] = {}
        if not workflows:
            return resources

        LOGGER.info("Adding resources for workflows: %s", ", ".join(workflows))
        for workflow_name, workflow in workflows.items():
            self._merge(resources, self.workflow_resources(workflow_name, workflow))

        LOGGER.info("Total resources generated: %d", len(resources))
        return resources

    def workflow_resources(
        self, workflow_name: str, workflow: WorkflowInput
    ) -> Dict[str, Resource]:
        spec = as_workflow_spec(workflow)
        resources: Dict[str, Resource] = {
            workflow_logical_id(workflow_name): build_workflow_resource(
                workflow_name, spec
            )
        }
        if spec.crawlers is not None:
            self._merge(resources, build_crawler_resources(workflow_name, spec))
        self._merge(resources, build_job_resources(workflow_name, spec))
        return resources

    def prepare_workflow_resources(
        self,
        workflows: Optional[Mapping[str, WorkflowInput]],
        template: MutableMapping[str, Any],
    ) -> MutableMapping[str, Any]:
        """
        Merge generated resources into `template["resources"]["Resources"]`.

        Existing entries under other logical ids are left untouched; nothing
        is created when there are no workflows.
        """

        if not workflows:
            return template

        generated = self.generate(workflows)
        section = template.get("resources") or {}
        template["resources"] = section
        existing = section.get("Resources") or {}
        section["Resources"] = existing
        self._merge(existing, generated)
        LOGGER.info("Total resources added: %d", len(existing))
        return template

    @staticmethod
    def _merge(
        target: MutableMapping[str, Resource], partial: Mapping[str, Resource]
    ) -> None:
        for logical_id, resource in partial.items():
            if logical_id in target:
                LOGGER.warning(
                    "Logical id %s generated more than once; keeping the latest declaration",
                    logical_id,
                )
            target[logical_id] = resource


def build_workflow_resource(workflow_name: str, workflow: WorkflowSpec) -> Resource:
    return make_resource(
        WORKFLOW_RESOURCE_TYPE,
        {
            "Name": workflow_name,
            "Description": workflow.description,
            "Tags": dict(workflow.tags or {}),
        },
    )


def generate_resources(
    workflows: Optional[Mapping[str, WorkflowInput]],
) -> Dict[str, Resource]:
    return ResourceGenerator().generate(workflows)
