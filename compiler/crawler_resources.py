"""
Crawler resources and the triggers that start a workflow from its first crawler.
"""

from __future__ import annotations

import copy
import logging
from typing import Dict, Tuple

from glueflow.ir.identifiers import (
    CRAWLER_RESOURCE_TYPE,
    TRIGGER_RESOURCE_TYPE,
    crawler_logical_id,
    crawler_to_job_trigger_logical_id,
    job_logical_id,
    ref,
    trigger_logical_id,
    workflow_logical_id,
)
from glueflow.ir.spec_schema import (
    DEFAULT_LOGICAL,
    DEFAULT_SCHEMA_CHANGE_POLICY,
    STATE_SUCCEEDED,
    TRIGGER_CONDITIONAL,
    TRIGGER_ON_DEMAND,
    CrawlerSpec,
    JobSpec,
    Resource,
    WorkflowInput,
    as_workflow_spec,
    make_resource,
)

LOGGER = logging.getLogger(__name__)


def build_crawler_resources(
    workflow_name: str, workflow: WorkflowInput
) -> Dict[str, Resource]:
    """
    Build one crawler resource per configured crawler.

    Only the first crawler is wired into the workflow: an ON_DEMAND trigger
    starts it and a CONDITIONAL trigger hands off to the first job once it
    succeeds. `skipCrawlerTriggers: true` suppresses both.
    """

    spec = as_workflow_spec(workflow)
    resources: Dict[str, Resource] = {}
    if spec.crawlers is None:
        return resources

    LOGGER.info(
        "Adding %d crawlers for workflow: %s", len(spec.crawlers), workflow_name
    )
    jobs = spec.job_list()
    for index, crawler in enumerate(spec.crawlers):
        logical_id = crawler_logical_id(workflow_name, crawler.name)
        LOGGER.info("Creating crawler resource: %s (%s)", crawler.name, logical_id)
        resources[logical_id] = build_crawler_resource(crawler)

        if index != 0 or not jobs:
            continue
        if spec.skips_crawler_triggers:
            LOGGER.info(
                "Skipping auto-trigger for crawler: %s (skipCrawlerTriggers is true)",
                crawler.name,
            )
            continue

        trigger_id, trigger = build_crawler_trigger(workflow_name, crawler)
        resources[trigger_id] = trigger
        handoff_id, handoff = build_crawler_to_job_trigger(
            workflow_name, crawler, jobs[0]
        )
        resources[handoff_id] = handoff

    return resources


def build_crawler_resource(crawler: CrawlerSpec) -> Resource:
    schema_change_policy = crawler.schema_change_policy or DEFAULT_SCHEMA_CHANGE_POLICY
    return make_resource(
        CRAWLER_RESOURCE_TYPE,
        {
            "Name": crawler.name,
            "Role": crawler.role,
            "DatabaseName": crawler.database_name,
            "Targets": copy.deepcopy(crawler.targets),
            "Schedule": crawler.schedule,
            "SchemaChangePolicy": copy.deepcopy(schema_change_policy),
            "Configuration": copy.deepcopy(crawler.configuration or {}),
            "CrawlerSecurityConfiguration": crawler.security_configuration,
            "Tags": dict(crawler.tags or {}),
        },
    )


def build_crawler_trigger(
    workflow_name: str, crawler: CrawlerSpec
) -> Tuple[str, Resource]:
    logical_id = trigger_logical_id(workflow_name, crawler.name)
    LOGGER.info(
        "Creating crawler trigger: %s for crawler: %s", logical_id, crawler.name
    )
    trigger = make_resource(
        TRIGGER_RESOURCE_TYPE,
        {
            "Name": f"{workflow_name}-{crawler.name}-trigger",
            "Type": TRIGGER_ON_DEMAND,
            "WorkflowName": ref(workflow_logical_id(workflow_name)),
            "Actions": [
                {"CrawlerName": ref(crawler_logical_id(workflow_name, crawler.name))}
            ],
        },
    )
    return logical_id, trigger


def build_crawler_to_job_trigger(
    workflow_name: str, crawler: CrawlerSpec, job: JobSpec
) -> Tuple[str, Resource]:
    logical_id = crawler_to_job_trigger_logical_id(
        workflow_name, crawler.name, job.name
    )
    LOGGER.info(
        "Creating crawler-to-job trigger: %s from crawler: %s to job: %s",
        logical_id,
        crawler.name,
        job.name,
    )
    trigger = make_resource(
        TRIGGER_RESOURCE_TYPE,
        {
            "Name": f"{workflow_name}-{crawler.name}-to-{job.name}-trigger",
            "Type": TRIGGER_CONDITIONAL,
            "WorkflowName": ref(workflow_logical_id(workflow_name)),
            "Actions": [{"JobName": ref(job_logical_id(workflow_name, job.name))}],
            "Predicate": {
                "Logical": DEFAULT_LOGICAL,
                "Conditions": [
                    {
                        "CrawlerName": ref(
                            crawler_logical_id(workflow_name, crawler.name)
                        ),
                        "CrawlState": STATE_SUCCEEDED,
                    }
                ],
            },
        },
    )
    return logical_id, trigger
