"""Shared builders used by the CDI resource factories."""

from typing import Optional

from ..constants import DEFAULT_RESOURCE_NAMES, ResourceNames
from ..models.resources import (
    Container,
    Deployment,
    DeploymentSpec,
    LabelSelector,
    ObjectMeta,
    PodSpec,
    PodTemplateSpec,
    ServiceAccount,
)


def with_common_labels(
    labels: Optional[dict[str, str]] = None,
    names: ResourceNames = DEFAULT_RESOURCE_NAMES,
) -> dict[str, str]:
    """Merge the common CDI labels into a label map.

    Keys already present in ``labels`` win. A new dict is returned and the
    input is left untouched; ``None`` is treated as an empty map.
    """
    merged = dict(labels or {})
    merged.setdefault(names.commonLabel, "")
    return merged


def format_image(repo: str, image: str, tag: str) -> str:
    """Build an image reference of the form ``repo/image:tag``."""
    return f"{repo}/{image}:{tag}"


def create_container(
    name: str,
    repo: str,
    image: str,
    tag: str,
    verbosity: str,
    pull_policy: str,
) -> Container:
    """Build a container running ``repo/image:tag`` with the given log verbosity."""
    return Container(
        name=name,
        image=format_image(repo, image, tag),
        args=[f"-v={verbosity}"],
        imagePullPolicy=pull_policy,
    )


def create_deployment(
    name: str,
    match_key: str,
    match_value: str,
    service_account: str,
    replicas: int,
    names: ResourceNames = DEFAULT_RESOURCE_NAMES,
) -> Deployment:
    """Build a deployment skeleton selecting pods by ``match_key=match_value``.

    The pod template has no containers or volumes yet. The service account is
    only bound when a non-empty name is given.

    Args:
        name: Deployment name
        match_key: Label key used by the selector
        match_value: Label value used by the selector
        service_account: Service account for the pods, or empty for the default
        replicas: Desired replica count

    Returns:
        Deployment description
    """
    match_labels = {match_key: match_value}
    return Deployment(
        metadata=ObjectMeta(name=name, labels=with_common_labels(match_labels, names)),
        spec=DeploymentSpec(
            replicas=replicas,
            selector=LabelSelector(matchLabels=match_labels),
            template=PodTemplateSpec(
                metadata=ObjectMeta(labels=with_common_labels(match_labels, names)),
                spec=PodSpec(serviceAccountName=service_account or None),
            ),
        ),
    )


def create_service_account(
    name: str, names: ResourceNames = DEFAULT_RESOURCE_NAMES
) -> ServiceAccount:
    """Build a service account carrying the common labels."""
    return ServiceAccount(
        metadata=ObjectMeta(name=name, labels=with_common_labels(None, names)),
    )
