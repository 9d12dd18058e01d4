"""
Typed intermediate representation of the `custom.glueWorkflows` configuration.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# Generated resources are plain mappings: {"Type": ..., "Properties": {...}}.
Resource = Dict[str, Any]

DEFAULT_SCHEMA_CHANGE_POLICY: Dict[str, str] = {
    "UpdateBehavior": "UPDATE_IN_DATABASE",
    "DeleteBehavior": "DEPRECATE_IN_DATABASE",
}
DEFAULT_COMMAND_NAME = "glueetl"
DEFAULT_PYTHON_VERSION = "3"
DEFAULT_MAX_RETRIES = 0
DEFAULT_TIMEOUT_MINUTES = 2880
DEFAULT_NUMBER_OF_WORKERS = 2
DEFAULT_WORKER_TYPE = "G.1X"
DEFAULT_GLUE_VERSION = "3.0"

TRIGGER_ON_DEMAND = "ON_DEMAND"
TRIGGER_CONDITIONAL = "CONDITIONAL"
DEFAULT_TRIGGER_TYPE = TRIGGER_CONDITIONAL
DEFAULT_LOGICAL = "AND"
STATE_SUCCEEDED = "SUCCEEDED"


class ConfigModel(BaseModel):
    """Base model reading the camelCase keys used in service files."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )


class JobSpec(ConfigModel):
    name: str
    role: Any = None
    script_location: Any = Field(default=None, alias="scriptLocation")
    type: Optional[str] = None
    python_version: Optional[str] = Field(default=None, alias="pythonVersion")
    arguments: Optional[Dict[str, Any]] = None
    max_retries: Optional[int] = Field(default=None, alias="maxRetries")
    timeout: Optional[int] = None
    workers: Optional[int] = None
    worker_type: Optional[str] = Field(default=None, alias="workerType")
    glue_version: Optional[str] = Field(default=None, alias="glueVersion")
    conditions: Optional[List[Dict[str, Any]]] = None
    logical: Optional[str] = None
    trigger_type: Optional[str] = Field(default=None, alias="triggerType")


class CrawlerSpec(ConfigModel):
    name: str
    role: Any = None
    database_name: Any = Field(default=None, alias="databaseName")
    targets: Any = None
    schedule: Any = None
    schema_change_policy: Optional[Dict[str, Any]] = Field(
        default=None, alias="schemaChangePolicy"
    )
    configuration: Any = None
    security_configuration: Any = Field(default=None, alias="securityConfiguration")
    tags: Optional[Dict[str, Any]] = None


class WorkflowSpec(ConfigModel):
    description: Optional[str] = None
    jobs: Optional[List[JobSpec]] = None
    crawlers: Optional[List[CrawlerSpec]] = None
    tags: Optional[Dict[str, Any]] = None
    # Kept untyped: only the boolean literal True enables skipping, so a
    # string "true" must survive parsing unchanged.
    skip_crawler_triggers: Any = Field(default=False, alias="skipCrawlerTriggers")

    @property
    def skips_crawler_triggers(self) -> bool:
        return self.skip_crawler_triggers is True

    def job_list(self) -> List[JobSpec]:
        return list(self.jobs or [])

    def crawler_list(self) -> List[CrawlerSpec]:
        return list(self.crawlers or [])


WorkflowInput = Union[WorkflowSpec, Mapping[str, Any]]


def as_workflow_spec(workflow: WorkflowInput) -> WorkflowSpec:
    if isinstance(workflow, WorkflowSpec):
        return workflow
    return WorkflowSpec.model_validate(dict(workflow))


def make_resource(resource_type: str, properties: Dict[str, Any]) -> Resource:
    return {"Type": resource_type, "Properties": properties}
