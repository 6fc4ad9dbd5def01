"""Pydantic models describing the Kubernetes objects built for the controller."""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter


class _Description(BaseModel):
    """Base for immutable resource descriptions."""

    class Config:
        populate_by_name = True
        frozen = True

    def to_dict(self) -> dict[str, Any]:
        """Convert to a manifest dictionary."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ObjectMeta(_Description):
    """Object metadata."""

    name: Optional[str] = None
    namespace: Optional[str] = None
    labels: Optional[dict[str, str]] = None


class EnvVar(_Description):
    """Container environment variable with a literal value."""

    name: str
    value: str


class ExecAction(_Description):
    """Command executed inside the container."""

    command: list[str]


class Probe(_Description):
    """Command-based container probe."""

    exec_: ExecAction = Field(alias="exec")
    initialDelaySeconds: int
    periodSeconds: int


class VolumeMount(_Description):
    """Mount of a pod volume into a container."""

    name: str
    mountPath: str


class KeyToPath(_Description):
    """Projection of a secret key to a file path."""

    key: str
    path: str


class SecretVolumeSource(_Description):
    """Volume populated from a secret."""

    secretName: str
    items: list[KeyToPath] = Field(default_factory=list)


class Volume(_Description):
    """Pod volume."""

    name: str
    secret: Optional[SecretVolumeSource] = None


class Container(_Description):
    """Container specification."""

    name: str
    image: str
    args: list[str] = Field(default_factory=list)
    imagePullPolicy: str
    env: list[EnvVar] = Field(default_factory=list)
    readinessProbe: Optional[Probe] = None
    volumeMounts: list[VolumeMount] = Field(default_factory=list)


class PodSpec(_Description):
    """Pod specification."""

    serviceAccountName: Optional[str] = None
    containers: list[Container] = Field(default_factory=list)
    volumes: list[Volume] = Field(default_factory=list)


class PodTemplateSpec(_Description):
    """Pod template of a workload."""

    metadata: ObjectMeta
    spec: PodSpec = Field(default_factory=PodSpec)


class LabelSelector(_Description):
    """Equality-based label selector."""

    matchLabels: dict[str, str]


class DeploymentSpec(_Description):
    """Deployment specification."""

    replicas: int
    selector: LabelSelector
    template: PodTemplateSpec


class ServicePort(_Description):
    """Port exposed by a service."""

    name: str
    port: int
    targetPort: Union[int, str]
    protocol: str = "TCP"


class ServiceSpec(_Description):
    """Service specification."""

    selector: dict[str, str]
    ports: list[ServicePort]


class ServiceAccount(_Description):
    """ServiceAccount resource."""

    apiVersion: Literal["v1"] = "v1"
    kind: Literal["ServiceAccount"] = "ServiceAccount"
    metadata: ObjectMeta


class Deployment(_Description):
    """Deployment resource."""

    apiVersion: Literal["apps/v1"] = "apps/v1"
    kind: Literal["Deployment"] = "Deployment"
    metadata: ObjectMeta
    spec: DeploymentSpec


class ConfigMap(_Description):
    """ConfigMap resource."""

    apiVersion: Literal["v1"] = "v1"
    kind: Literal["ConfigMap"] = "ConfigMap"
    metadata: ObjectMeta
    data: Optional[dict[str, str]] = None


class Service(_Description):
    """Service resource."""

    apiVersion: Literal["v1"] = "v1"
    kind: Literal["Service"] = "Service"
    metadata: ObjectMeta
    spec: ServiceSpec


ResourceDescription = Annotated[
    Union[ServiceAccount, Deployment, ConfigMap, Service],
    Field(discriminator="kind"),
]

_RESOURCE_ADAPTER: TypeAdapter = TypeAdapter(ResourceDescription)


def parse_resource(data: dict[str, Any]) -> ResourceDescription:
    """Validate a manifest dictionary into the matching resource description.

    Raises:
        pydantic.ValidationError: if the kind is unknown or fields are malformed
    """
    return _RESOURCE_ADAPTER.validate_python(data)
