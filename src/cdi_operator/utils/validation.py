"""Validation utilities for the controller factory arguments."""

from ..models.args import FactoryArgs, PullPolicy

_REQUIRED_FIELDS = [
    "namespace",
    "imageRepository",
    "controllerImageName",
    "importerImageName",
    "clonerImageName",
    "uploadServerImageName",
    "imageTag",
    "logVerbosity",
]


def validate_args(args: FactoryArgs) -> list[str]:
    """Validate factory arguments before building resources.

    The resource builders accept anything; this check is for callers that
    want to reject incomplete configuration up front.

    Args:
        args: Factory arguments to validate

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    for field in _REQUIRED_FIELDS:
        if not getattr(args, field):
            errors.append(f"{field} is required")

    valid_policies = [policy.value for policy in PullPolicy]
    if args.imagePullPolicy not in valid_policies:
        errors.append(
            f"imagePullPolicy must be one of {valid_policies}, got '{args.imagePullPolicy}'"
        )

    if args.logVerbosity and not args.logVerbosity.isdigit():
        errors.append(f"logVerbosity must be a non-negative integer, got '{args.logVerbosity}'")

    return errors
