from glueflow.compiler.crawler_resources import (
    build_crawler_resource,
    build_crawler_resources,
    build_crawler_to_job_trigger,
    build_crawler_trigger,
)
from glueflow.compiler.job_resources import (
    build_job_resource,
    build_job_resources,
    build_job_trigger,
)
from glueflow.compiler.resource_generator import (
    ResourceGenerator,
    build_workflow_resource,
    generate_resources,
)

__all__ = [
    "ResourceGenerator",
    "generate_resources",
    "build_workflow_resource",
    "build_crawler_resources",
    "build_crawler_resource",
    "build_crawler_trigger",
    "build_crawler_to_job_trigger",
    "build_job_resources",
    "build_job_resource",
    "build_job_trigger",
]
