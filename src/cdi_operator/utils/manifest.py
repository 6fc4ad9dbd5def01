"""YAML rendering of resource descriptions."""

from typing import Any, Iterable

import yaml

from ..models.resources import ResourceDescription


def to_manifests(resources: Iterable[ResourceDescription]) -> list[dict[str, Any]]:
    """Convert resource descriptions to manifest dictionaries."""
    return [resource.to_dict() for resource in resources]


def render_manifests(resources: Iterable[ResourceDescription]) -> str:
    """Render resource descriptions as a multi-document YAML stream.

    Keys keep the order in which the descriptions declare them.
    """
    return yaml.safe_dump_all(
        to_manifests(resources),
        default_flow_style=False,
        sort_keys=False,
        explicit_start=True,
    )
