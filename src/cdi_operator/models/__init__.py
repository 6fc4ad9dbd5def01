"""Models for the factory arguments and the generated resources."""

from .args import FactoryArgs, PullPolicy
from .resources import (
    ConfigMap,
    Deployment,
    ResourceDescription,
    Service,
    ServiceAccount,
    parse_resource,
)

__all__ = [
    "ConfigMap",
    "Deployment",
    "FactoryArgs",
    "PullPolicy",
    "ResourceDescription",
    "Service",
    "ServiceAccount",
    "parse_resource",
]
