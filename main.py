"""
Glue workflow resource compiler entrypoint and packaging lifecycle host.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, MutableMapping, Optional

from glueflow.compiler.resource_generator import ResourceGenerator
from glueflow.ir.validators import (
    ConfigurationError,
    parse_workflows,
    validate_workflow_configurations,
)
from glueflow.services.config_service import extract_glue_workflows, load_service_config
from glueflow.services.template_service import (
    SUPPORTED_FORMATS,
    render_template,
    resources_section,
)

LOGGER = logging.getLogger(__name__)

BUILD_HOOKS = (
    "initialize",
    "before:package:initialize",
    "after:package:initialize",
)


class GlueWorkflowsPlugin:
    """
    Runs the build phases against a service definition.

    `initialize` reads `custom.glueWorkflows`, `before:package:initialize`
    validates it and `after:package:initialize` writes the generated
    resources into `service["resources"]["Resources"]`.
    """

    def __init__(
        self,
        service: Optional[MutableMapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
        resource_generator: Optional[ResourceGenerator] = None,
    ) -> None:
        self.service: MutableMapping[str, Any] = service if service is not None else {}
        self.options: Dict[str, Any] = dict(options or {})
        self.resource_generator = resource_generator or ResourceGenerator()
        self.workflows: Dict[str, Any] = {}
        self.hooks: Dict[str, Callable[[], None]] = {
            "initialize": self.initialize,
            "before:package:initialize": self.before_package,
            "after:package:initialize": self.after_package,
            "before:deploy:deploy": self.before_deploy,
        }

    def initialize(self) -> None:
        LOGGER.info("Initializing AWS Glue Workflows plugin...")
        self.workflows = extract_glue_workflows(self.service)

    def before_package(self) -> None:
        LOGGER.info("Preparing AWS Glue Workflows...")
        validate_workflow_configurations(self.workflows)

    def after_package(self) -> None:
        LOGGER.info("Processing AWS Glue Workflows configurations...")
        self.resource_generator.prepare_workflow_resources(
            parse_workflows(self.workflows), self.service
        )

    def before_deploy(self) -> None:
        LOGGER.info("Deploying AWS Glue Workflows...")

    def run_hook(self, name: str) -> None:
        hook = self.hooks.get(name)
        if hook is None:
            raise KeyError(f"Unknown lifecycle hook: {name}")
        hook()

    def package(self) -> MutableMapping[str, Any]:
        for name in BUILD_HOOKS:
            self.run_hook(name)
        return self.service


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate AWS Glue workflow resources from custom.glueWorkflows"
    )
    parser.add_argument("--config", type=str, required=True)
    parser.add_argument("--format", choices=SUPPORTED_FORMATS, default="json")
    parser.add_argument("--output-file", type=str, default=None)
    parser.add_argument("--resources-only", action="store_true")
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        service = load_service_config(args.config)
        GlueWorkflowsPlugin(service).package()
    except ConfigurationError as exc:
        LOGGER.error("%s", exc)
        return 2

    payload = resources_section(service) if args.resources_only else service
    output = render_template(payload, output_format=args.format)
    print(output)
    if args.output_file:
        Path(args.output_file).write_text(output, encoding="utf-8")
    return 0


if __name__ == "__main__":
    sys.exit(main())
