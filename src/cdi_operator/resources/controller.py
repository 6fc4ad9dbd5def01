"""Resource builders for the CDI controller workload."""

import logging

from ..constants import (
    DEFAULT_RESOURCE_NAMES,
    ENV_CLONER_IMAGE,
    ENV_IMPORTER_IMAGE,
    ENV_PULL_POLICY,
    ENV_UPLOADPROXY_SERVICE,
    ENV_UPLOADSERVER_IMAGE,
    PROTOCOL_TCP,
    READINESS_COMMAND,
    READINESS_INITIAL_DELAY_SECONDS,
    READINESS_PERIOD_SECONDS,
    ResourceNames,
)
from ..models.args import FactoryArgs
from ..models.resources import (
    ConfigMap,
    Deployment,
    EnvVar,
    ExecAction,
    KeyToPath,
    ObjectMeta,
    Probe,
    ResourceDescription,
    SecretVolumeSource,
    Service,
    ServiceAccount,
    ServicePort,
    ServiceSpec,
    Volume,
    VolumeMount,
)
from .common import (
    create_container,
    create_deployment,
    create_service_account,
    format_image,
    with_common_labels,
)

logger = logging.getLogger(__name__)


def get_controller_privileged_accounts(
    args: FactoryArgs, names: ResourceNames = DEFAULT_RESOURCE_NAMES
) -> list[str]:
    """Return the fully qualified identities of the controller service account."""
    return [f"{names.privilegedAccountPrefix}:{args.namespace}:{names.serviceAccount}"]


def create_controller_resources(
    args: FactoryArgs, names: ResourceNames = DEFAULT_RESOURCE_NAMES
) -> list[ResourceDescription]:
    """Build the namespaced resources of the CDI controller.

    The result always holds a ServiceAccount, a Deployment and a ConfigMap,
    in that order. Arguments are not validated; whatever they contain ends
    up in the descriptions as is.

    Args:
        args: Factory arguments
        names: Well-known resource names

    Returns:
        List of resource descriptions
    """
    logger.debug(
        f"Building controller resources for namespace {args.namespace} "
        f"({args.imageRepository}/{args.controllerImageName}:{args.imageTag})"
    )
    return [
        create_controller_service_account(names),
        create_controller_deployment(
            args.imageRepository,
            args.controllerImageName,
            args.importerImageName,
            args.clonerImageName,
            args.uploadServerImageName,
            args.imageTag,
            args.logVerbosity,
            args.imagePullPolicy,
            names,
        ),
        create_insecure_reg_config_map(names),
    ]


def create_controller_service_account(
    names: ResourceNames = DEFAULT_RESOURCE_NAMES,
) -> ServiceAccount:
    """Build the controller service account."""
    return create_service_account(names.serviceAccount, names)


def create_controller_deployment(
    repo: str,
    controller_image: str,
    importer_image: str,
    cloner_image: str,
    upload_server_image: str,
    tag: str,
    verbosity: str,
    pull_policy: str,
    names: ResourceNames = DEFAULT_RESOURCE_NAMES,
) -> Deployment:
    """Build the controller Deployment.

    The controller learns the worker images through environment variables
    and reads the API signing public key from a secret volume.

    Args:
        repo: Image repository shared by all CDI images
        controller_image: Controller image name
        importer_image: Importer image name
        cloner_image: Cloner image name
        upload_server_image: Upload server image name
        tag: Image tag shared by all CDI images
        verbosity: Log verbosity passed to the controller
        pull_policy: Image pull policy, also handed to the controller

    Returns:
        Deployment description
    """
    deployment = create_deployment(
        names.deployment,
        names.matchKey,
        names.matchValue,
        names.serviceAccount,
        names.replicas,
        names,
    )
    container = create_container(
        names.container, repo, controller_image, tag, verbosity, pull_policy
    )

    # Worker images and settings handed to the controller
    env = [
        EnvVar(name=ENV_IMPORTER_IMAGE, value=format_image(repo, importer_image, tag)),
        EnvVar(name=ENV_CLONER_IMAGE, value=format_image(repo, cloner_image, tag)),
        EnvVar(name=ENV_UPLOADSERVER_IMAGE, value=format_image(repo, upload_server_image, tag)),
        EnvVar(name=ENV_UPLOADPROXY_SERVICE, value=names.uploadProxyService),
        EnvVar(name=ENV_PULL_POLICY, value=pull_policy),
    ]

    readiness_probe = Probe(
        exec=ExecAction(command=list(READINESS_COMMAND)),
        initialDelaySeconds=READINESS_INITIAL_DELAY_SECONDS,
        periodSeconds=READINESS_PERIOD_SECONDS,
    )

    # API signing public key
    volume_mounts = [
        VolumeMount(name=names.signingKeySecret, mountPath=names.signingKeyMountPath),
    ]

    volumes = [
        Volume(
            name=names.signingKeySecret,
            secret=SecretVolumeSource(
                secretName=names.signingKeySecret,
                items=[KeyToPath(key=names.signingKeyFile, path=names.signingKeyFile)],
            ),
        ),
    ]

    container = container.model_copy(
        update={"env": env, "readinessProbe": readiness_probe, "volumeMounts": volume_mounts}
    )
    template = deployment.spec.template
    pod_spec = template.spec.model_copy(update={"containers": [container], "volumes": volumes})
    template = template.model_copy(update={"spec": pod_spec})
    spec = deployment.spec.model_copy(update={"template": template})
    return deployment.model_copy(update={"spec": spec})


def create_prometheus_service(names: ResourceNames = DEFAULT_RESOURCE_NAMES) -> Service:
    """Build the Service exposing controller metrics to Prometheus."""
    return Service(
        metadata=ObjectMeta(
            name=names.prometheusService,
            labels={
                names.prometheusLabel: "",
                names.kubevirtLabel: "",
            },
        ),
        spec=ServiceSpec(
            selector={names.prometheusLabel: ""},
            ports=[
                ServicePort(
                    name=names.metricsPortName,
                    port=names.metricsPort,
                    targetPort=names.metricsPortName,
                    protocol=PROTOCOL_TCP,
                ),
            ],
        ),
    )


def create_insecure_reg_config_map(names: ResourceNames = DEFAULT_RESOURCE_NAMES) -> ConfigMap:
    """Build the empty ConfigMap listing insecure registries."""
    return ConfigMap(
        metadata=ObjectMeta(
            name=names.insecureRegistryConfigMap,
            labels=with_common_labels(None, names),
        ),
    )
