"""
Build-phase services around the resource compiler.
"""

from glueflow.services.config_service import (
    extract_glue_workflows,
    load_glue_workflows,
    load_service_config,
)
from glueflow.services.template_service import (
    prune_empty_values,
    render_template,
    resources_section,
)

__all__ = [
    "extract_glue_workflows",
    "load_glue_workflows",
    "load_service_config",
    "prune_empty_values",
    "render_template",
    "resources_section",
]
