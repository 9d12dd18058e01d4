"""Glue workflow resource compiler package."""

from glueflow.compiler.resource_generator import ResourceGenerator, generate_resources
from glueflow.ir.validators import ConfigurationError, validate_workflow_configurations
from glueflow.main import GlueWorkflowsPlugin

__version__ = "0.1.0"

__all__ = [
    "GlueWorkflowsPlugin",
    "ResourceGenerator",
    "generate_resources",
    "ConfigurationError",
    "validate_workflow_configurations",
]
