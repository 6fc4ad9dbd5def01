"""Entry point rendering the CDI controller resources as YAML."""

import argparse
import logging
import sys
from typing import Optional

from .exceptions import ValidationFailedError
from .models.args import FactoryArgs, PullPolicy
from .resources.controller import (
    create_controller_resources,
    create_prometheus_service,
    get_controller_privileged_accounts,
)
from .utils.logging_utils import setup_logging
from .utils.manifest import render_manifests
from .utils.validation import validate_args

logger = logging.getLogger(__name__)

# Command line option destination -> FactoryArgs field
_ARG_FIELDS = {
    "namespace": "namespace",
    "image_repository": "imageRepository",
    "controller_image": "controllerImageName",
    "importer_image": "importerImageName",
    "cloner_image": "clonerImageName",
    "uploadserver_image": "uploadServerImageName",
    "tag": "imageTag",
    "verbosity": "logVerbosity",
    "pull_policy": "imagePullPolicy",
}


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="cdi-operator",
        description="Render the CDI controller resources as a YAML manifest stream.",
    )
    parser.add_argument("--namespace", help="Namespace the controller is installed in")
    parser.add_argument("--image-repository", help="Repository shared by the CDI images")
    parser.add_argument("--controller-image", help="Controller image name")
    parser.add_argument("--importer-image", help="Importer image name")
    parser.add_argument("--cloner-image", help="Cloner image name")
    parser.add_argument("--uploadserver-image", help="Upload server image name")
    parser.add_argument("--tag", help="Image tag shared by the CDI images")
    parser.add_argument("--verbosity", help="Controller log verbosity")
    parser.add_argument(
        "--pull-policy",
        help=f"Image pull policy ({', '.join(policy.value for policy in PullPolicy)})",
    )
    parser.add_argument(
        "--from-env",
        action="store_true",
        help="Load defaults from the operator environment variables",
    )
    parser.add_argument(
        "--metrics-service",
        action="store_true",
        help="Also render the Prometheus metrics Service",
    )
    parser.add_argument(
        "--privileged-accounts",
        action="store_true",
        help="Print the privileged service account names instead of manifests",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail instead of warning when the arguments do not validate",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def load_args(options: argparse.Namespace) -> FactoryArgs:
    """Build factory arguments from parsed command line options."""
    base = FactoryArgs.from_env() if options.from_env else FactoryArgs()
    overrides = {
        field: getattr(options, dest)
        for dest, field in _ARG_FIELDS.items()
        if getattr(options, dest) is not None
    }
    return base.model_copy(update=overrides)


def check_args(args: FactoryArgs, strict: bool = False) -> None:
    """Validate factory arguments, warning or raising on problems.

    Raises:
        ValidationFailedError: if validation fails and strict is set
    """
    errors = validate_args(args)
    if errors and strict:
        raise ValidationFailedError(errors)
    for message in errors:
        logger.warning(message)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the command line tool."""
    options = build_parser().parse_args(argv)
    setup_logging(options.verbose)

    args = load_args(options)

    try:
        check_args(args, strict=options.strict)
    except ValidationFailedError as e:
        logger.error(str(e))
        return 1

    if options.privileged_accounts:
        for account in get_controller_privileged_accounts(args):
            print(account)
        return 0

    resources = create_controller_resources(args)
    if options.metrics_service:
        resources.append(create_prometheus_service())

    logger.info(f"Rendering {len(resources)} resources for namespace {args.namespace}")
    sys.stdout.write(render_manifests(resources))
    return 0


if __name__ == "__main__":
    sys.exit(main())
