"""Resource builders for Kubernetes objects."""

from . import common, controller
from .controller import (
    create_controller_resources,
    create_prometheus_service,
    get_controller_privileged_accounts,
)

__all__ = [
    "common",
    "controller",
    "create_controller_resources",
    "create_prometheus_service",
    "get_controller_privileged_accounts",
]
