"""Shared fixtures for the CDI operator tests."""

import pytest

from cdi_operator.models.args import FactoryArgs


@pytest.fixture
def factory_args() -> FactoryArgs:
    """Factory arguments with a non-default repository and tag."""
    return FactoryArgs(
        namespace="cdi",
        imageRepository="quay.io/org",
        controllerImageName="cdi-controller",
        importerImageName="cdi-importer",
        clonerImageName="cdi-cloner",
        uploadServerImageName="cdi-uploadserver",
        imageTag="v1.2.3",
        logVerbosity="2",
        imagePullPolicy="Always",
    )
