"""
Job resources and the triggers that sequence each job after its predecessor.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List, Tuple

from glueflow.ir.identifiers import (
    JOB_RESOURCE_TYPE,
    TRIGGER_RESOURCE_TYPE,
    job_logical_id,
    ref,
    trigger_logical_id,
    workflow_logical_id,
)
from glueflow.ir.spec_schema import (
    DEFAULT_COMMAND_NAME,
    DEFAULT_GLUE_VERSION,
    DEFAULT_LOGICAL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_NUMBER_OF_WORKERS,
    DEFAULT_PYTHON_VERSION,
    DEFAULT_TIMEOUT_MINUTES,
    DEFAULT_TRIGGER_TYPE,
    DEFAULT_WORKER_TYPE,
    STATE_SUCCEEDED,
    TRIGGER_CONDITIONAL,
    JobSpec,
    Resource,
    WorkflowInput,
    as_workflow_spec,
    make_resource,
)

LOGGER = logging.getLogger(__name__)


def build_job_resources(
    workflow_name: str, workflow: WorkflowInput
) -> Dict[str, Resource]:
    spec = as_workflow_spec(workflow)
    jobs = spec.job_list()
    resources: Dict[str, Resource] = {}
    if not jobs:
        return resources

    LOGGER.info("Adding %d jobs for workflow: %s", len(jobs), workflow_name)
    for index, job in enumerate(jobs):
        logical_id = job_logical_id(workflow_name, job.name)
        LOGGER.info("Creating job resource: %s (%s)", job.name, logical_id)
        resources[logical_id] = build_job_resource(job)

        if index > 0:
            trigger_id, trigger = build_job_trigger(workflow_name, job, jobs[index - 1])
            resources[trigger_id] = trigger

    return resources


def build_job_resource(job: JobSpec) -> Resource:
    return make_resource(
        JOB_RESOURCE_TYPE,
        {
            "Name": job.name,
            "Role": job.role,
            "Command": {
                "Name": job.type or DEFAULT_COMMAND_NAME,
                "ScriptLocation": job.script_location,
                "PythonVersion": job.python_version or DEFAULT_PYTHON_VERSION,
            },
            "DefaultArguments": dict(job.arguments or {}),
            "MaxRetries": job.max_retries or DEFAULT_MAX_RETRIES,
            "Timeout": job.timeout or DEFAULT_TIMEOUT_MINUTES,
            "NumberOfWorkers": job.workers or DEFAULT_NUMBER_OF_WORKERS,
            "WorkerType": job.worker_type or DEFAULT_WORKER_TYPE,
            "GlueVersion": job.glue_version or DEFAULT_GLUE_VERSION,
        },
    )


def build_job_trigger(
    workflow_name: str, job: JobSpec, previous_job: JobSpec
) -> Tuple[str, Resource]:
    """
    Build the trigger that starts `job`.

    CONDITIONAL triggers wait on the job's own `conditions` when given and on
    `previous_job` succeeding otherwise. Any other trigger type carries no
    predicate at all.
    """

    logical_id = trigger_logical_id(workflow_name, job.name)
    LOGGER.info("Creating job trigger: %s for job: %s", logical_id, job.name)

    trigger_type = job.trigger_type or DEFAULT_TRIGGER_TYPE
    properties: Dict[str, Any] = {
        "Name": f"{workflow_name}-{job.name}-trigger",
        "Type": trigger_type,
        "WorkflowName": ref(workflow_logical_id(workflow_name)),
        "Actions": [{"JobName": ref(job_logical_id(workflow_name, job.name))}],
    }

    if trigger_type == TRIGGER_CONDITIONAL:
        predicate = {
            "Logical": _logical_operator(job),
            "Conditions": _job_conditions(workflow_name, job, previous_job),
        }
        properties["Predicate"] = predicate
        LOGGER.info("Job trigger created with predicate: %s", predicate)
    else:
        LOGGER.info("Created %s trigger for job: %s", trigger_type, job.name)

    return logical_id, make_resource(TRIGGER_RESOURCE_TYPE, properties)


def _job_conditions(
    workflow_name: str, job: JobSpec, previous_job: JobSpec
) -> List[Dict[str, Any]]:
    if job.conditions:
        LOGGER.info("Using custom conditions for job: %s", job.name)
        conditions: List[Dict[str, Any]] = []
        for condition in job.conditions:
            rendered = copy.deepcopy(condition)
            target = rendered.get("JobName")
            # Mappings such as {"Ref": ...} already point at a logical id.
            if isinstance(target, str) and target:
                rendered["JobName"] = ref(job_logical_id(workflow_name, target))
            conditions.append(rendered)
        return conditions

    return [
        {
            "JobName": ref(job_logical_id(workflow_name, previous_job.name)),
            "State": STATE_SUCCEEDED,
        }
    ]


def _logical_operator(job: JobSpec) -> str:
    if job.logical and job.logical.strip():
        return job.logical.strip()
    return DEFAULT_LOGICAL
