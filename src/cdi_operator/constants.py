"""Constants and well-known names for the CDI controller resources."""

from pydantic import BaseModel

# Service accounts
CONTROLLER_SERVICE_ACCOUNT = "cdi-sa"
PRIVILEGED_ACCOUNT_PREFIX = "system:serviceaccount"

# Deployment
CONTROLLER_DEPLOYMENT_NAME = "cdi-deployment"
CONTROLLER_CONTAINER_NAME = "cdi-controller"
CONTROLLER_MATCH_KEY = "app"
CONTROLLER_MATCH_VALUE = "containerized-data-importer"
CONTROLLER_REPLICAS = 1

# Labels
LABEL_CDI = "cdi.kubevirt.io"
LABEL_KUBEVIRT = "kubevirt.io"
LABEL_PROMETHEUS = "prometheus.cdi.kubevirt.io"

# ConfigMaps
INSECURE_REGISTRY_CONFIGMAP = "cdi-insecure-registries"

# Services
UPLOAD_PROXY_SERVICE = "cdi-uploadproxy"
PROMETHEUS_SERVICE_NAME = "kubevirt-prometheus-metrics"
METRICS_PORT_NAME = "metrics"
METRICS_PORT = 443
PROTOCOL_TCP = "TCP"

# Readiness probe
READINESS_COMMAND = ("cat", "/tmp/ready")
READINESS_INITIAL_DELAY_SECONDS = 2
READINESS_PERIOD_SECONDS = 5

# API signing key
API_SIGNING_KEY_SECRET = "cdi-api-signing-key"
API_SIGNING_KEY_FILE = "id_rsa.pub"
API_SERVER_PUBLIC_KEY_DIR = "/var/run/cdi/apiserver/key"

# Controller environment variable names
ENV_IMPORTER_IMAGE = "IMPORTER_IMAGE"
ENV_CLONER_IMAGE = "CLONER_IMAGE"
ENV_UPLOADSERVER_IMAGE = "UPLOADSERVER_IMAGE"
ENV_UPLOADPROXY_SERVICE = "UPLOADPROXY_SERVICE"
ENV_PULL_POLICY = "PULL_POLICY"

# Default factory arguments
DEFAULT_NAMESPACE = "cdi"
DEFAULT_IMAGE_REPOSITORY = "kubevirt"
DEFAULT_CONTROLLER_IMAGE = "cdi-controller"
DEFAULT_IMPORTER_IMAGE = "cdi-importer"
DEFAULT_CLONER_IMAGE = "cdi-cloner"
DEFAULT_UPLOADSERVER_IMAGE = "cdi-uploadserver"
DEFAULT_IMAGE_TAG = "latest"
DEFAULT_VERBOSITY = "1"
DEFAULT_IMAGE_PULL_POLICY = "IfNotPresent"


class ResourceNames(BaseModel):
    """Read-only table of the names shared by the resource builders."""

    serviceAccount: str = CONTROLLER_SERVICE_ACCOUNT
    privilegedAccountPrefix: str = PRIVILEGED_ACCOUNT_PREFIX
    deployment: str = CONTROLLER_DEPLOYMENT_NAME
    container: str = CONTROLLER_CONTAINER_NAME
    matchKey: str = CONTROLLER_MATCH_KEY
    matchValue: str = CONTROLLER_MATCH_VALUE
    replicas: int = CONTROLLER_REPLICAS
    commonLabel: str = LABEL_CDI
    kubevirtLabel: str = LABEL_KUBEVIRT
    prometheusLabel: str = LABEL_PROMETHEUS
    insecureRegistryConfigMap: str = INSECURE_REGISTRY_CONFIGMAP
    uploadProxyService: str = UPLOAD_PROXY_SERVICE
    prometheusService: str = PROMETHEUS_SERVICE_NAME
    metricsPortName: str = METRICS_PORT_NAME
    metricsPort: int = METRICS_PORT
    signingKeySecret: str = API_SIGNING_KEY_SECRET
    signingKeyFile: str = API_SIGNING_KEY_FILE
    signingKeyMountPath: str = API_SERVER_PUBLIC_KEY_DIR

    class Config:
        frozen = True


DEFAULT_RESOURCE_NAMES = ResourceNames()
