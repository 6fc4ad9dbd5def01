"""Resource factory for the CDI controller workload."""

from .constants import DEFAULT_RESOURCE_NAMES, ResourceNames
from .models import FactoryArgs, PullPolicy, ResourceDescription
from .resources import (
    create_controller_resources,
    create_prometheus_service,
    get_controller_privileged_accounts,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_RESOURCE_NAMES",
    "FactoryArgs",
    "PullPolicy",
    "ResourceDescription",
    "ResourceNames",
    "create_controller_resources",
    "create_prometheus_service",
    "get_controller_privileged_accounts",
]
