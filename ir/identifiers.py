"""
Logical identifier derivation for generated CloudFormation resources.
"""

from __future__ import annotations

import re
from typing import Dict

WORKFLOW_RESOURCE_TYPE = "AWS::Glue::Workflow"
CRAWLER_RESOURCE_TYPE = "AWS::Glue::Crawler"
JOB_RESOURCE_TYPE = "AWS::Glue::Job"
TRIGGER_RESOURCE_TYPE = "AWS::Glue::Trigger"

WORKFLOW_ID_PREFIX = "GlueWorkflow"
CRAWLER_ID_PREFIX = "GlueCrawler"
JOB_ID_PREFIX = "GlueJob"
TRIGGER_ID_PREFIX = "GlueTrigger"

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")


def normalize_resource_id(value: str) -> str:
    return _NON_ALPHANUMERIC.sub("", value)


def workflow_logical_id(workflow_name: str) -> str:
    return f"{WORKFLOW_ID_PREFIX}{normalize_resource_id(workflow_name)}"


def crawler_logical_id(workflow_name: str, crawler_name: str) -> str:
    return (
        f"{CRAWLER_ID_PREFIX}{normalize_resource_id(workflow_name)}"
        f"{normalize_resource_id(crawler_name)}"
    )


def job_logical_id(workflow_name: str, job_name: str) -> str:
    return (
        f"{JOB_ID_PREFIX}{normalize_resource_id(workflow_name)}"
        f"{normalize_resource_id(job_name)}"
    )


def trigger_logical_id(workflow_name: str, resource_name: str) -> str:
    """Trigger id for the crawler or job the trigger starts."""

    return (
        f"{TRIGGER_ID_PREFIX}{normalize_resource_id(workflow_name)}"
        f"{normalize_resource_id(resource_name)}"
    )


def crawler_to_job_trigger_logical_id(
    workflow_name: str, crawler_name: str, job_name: str
) -> str:
    return (
        f"{TRIGGER_ID_PREFIX}{normalize_resource_id(workflow_name)}"
        f"{normalize_resource_id(crawler_name)}ToJob{normalize_resource_id(job_name)}"
    )


def ref(logical_id: str) -> Dict[str, str]:
    """Symbolic reference resolved by CloudFormation at deploy time."""

    return {"Ref": logical_id}
