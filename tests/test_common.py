"""Tests for the shared resource builders."""

from cdi_operator.resources.common import (
    create_container,
    create_deployment,
    create_service_account,
    format_image,
    with_common_labels,
)


def test_with_common_labels_none() -> None:
    assert with_common_labels(None) == {"cdi.kubevirt.io": ""}
    assert with_common_labels() == {"cdi.kubevirt.io": ""}


def test_with_common_labels_merges() -> None:
    labels = {"app": "demo"}

    merged = with_common_labels(labels)

    assert merged == {"app": "demo", "cdi.kubevirt.io": ""}
    assert labels == {"app": "demo"}


def test_with_common_labels_keeps_existing_value() -> None:
    assert with_common_labels({"cdi.kubevirt.io": "custom"}) == {"cdi.kubevirt.io": "custom"}


def test_format_image() -> None:
    assert format_image("quay.io/org", "cdi-importer", "v1.2.3") == "quay.io/org/cdi-importer:v1.2.3"
    assert format_image("", "", "") == "/:"


def test_create_container() -> None:
    container = create_container("worker", "docker.io/kubevirt", "cdi-worker", "v1", "3", "Never")

    assert container.to_dict() == {
        "name": "worker",
        "image": "docker.io/kubevirt/cdi-worker:v1",
        "args": ["-v=3"],
        "imagePullPolicy": "Never",
        "env": [],
        "volumeMounts": [],
    }


def test_create_deployment() -> None:
    deployment = create_deployment("demo", "app", "demo-app", "demo-sa", 3)

    assert deployment.to_dict() == {
        "apiVersion": "apps/v1",
        "kind": "Deployment",
        "metadata": {
            "name": "demo",
            "labels": {"app": "demo-app", "cdi.kubevirt.io": ""},
        },
        "spec": {
            "replicas": 3,
            "selector": {"matchLabels": {"app": "demo-app"}},
            "template": {
                "metadata": {"labels": {"app": "demo-app", "cdi.kubevirt.io": ""}},
                "spec": {"serviceAccountName": "demo-sa", "containers": [], "volumes": []},
            },
        },
    }


def test_create_deployment_without_service_account() -> None:
    deployment = create_deployment("demo", "app", "demo-app", "", 1)

    assert deployment.spec.template.spec.serviceAccountName is None
    assert "serviceAccountName" not in deployment.to_dict()["spec"]["template"]["spec"]


def test_create_service_account() -> None:
    service_account = create_service_account("demo-sa")

    assert service_account.kind == "ServiceAccount"
    assert service_account.metadata.name == "demo-sa"
    assert service_account.metadata.labels == {"cdi.kubevirt.io": ""}
