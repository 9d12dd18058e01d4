from glueflow.ir.identifiers import (
    crawler_logical_id,
    crawler_to_job_trigger_logical_id,
    job_logical_id,
    normalize_resource_id,
    ref,
    trigger_logical_id,
    workflow_logical_id,
)
from glueflow.ir.spec_schema import (
    DEFAULT_SCHEMA_CHANGE_POLICY,
    CrawlerSpec,
    JobSpec,
    Resource,
    WorkflowSpec,
    as_workflow_spec,
)
from glueflow.ir.validators import (
    ConfigurationError,
    parse_workflows,
    validate_crawlers,
    validate_workflow,
    validate_workflow_configurations,
)

__all__ = [
    "WorkflowSpec",
    "JobSpec",
    "CrawlerSpec",
    "Resource",
    "DEFAULT_SCHEMA_CHANGE_POLICY",
    "as_workflow_spec",
    "ConfigurationError",
    "validate_workflow_configurations",
    "validate_workflow",
    "validate_crawlers",
    "parse_workflows",
    "normalize_resource_id",
    "workflow_logical_id",
    "crawler_logical_id",
    "job_logical_id",
    "trigger_logical_id",
    "crawler_to_job_trigger_logical_id",
    "ref",
]
