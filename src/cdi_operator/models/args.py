"""Pydantic model for the factory arguments of the controller resources."""

import os
from enum import Enum
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from ..constants import (
    DEFAULT_CLONER_IMAGE,
    DEFAULT_CONTROLLER_IMAGE,
    DEFAULT_IMAGE_PULL_POLICY,
    DEFAULT_IMAGE_REPOSITORY,
    DEFAULT_IMAGE_TAG,
    DEFAULT_IMPORTER_IMAGE,
    DEFAULT_NAMESPACE,
    DEFAULT_UPLOADSERVER_IMAGE,
    DEFAULT_VERBOSITY,
)


class PullPolicy(str, Enum):
    """Image pull policies recognized by the container runtime."""

    ALWAYS = "Always"
    IF_NOT_PRESENT = "IfNotPresent"
    NEVER = "Never"


# Environment variables read by FactoryArgs.from_env
ENV_FIELDS = {
    "OPERATOR_NAMESPACE": "namespace",
    "DOCKER_REPO": "imageRepository",
    "CONTROLLER_IMAGE": "controllerImageName",
    "IMPORTER_IMAGE": "importerImageName",
    "CLONER_IMAGE": "clonerImageName",
    "UPLOADSERVER_IMAGE": "uploadServerImageName",
    "DOCKER_TAG": "imageTag",
    "VERBOSITY": "logVerbosity",
    "PULL_POLICY": "imagePullPolicy",
}


class FactoryArgs(BaseModel):
    """Arguments consumed by the controller resource factory.

    Values are not checked for content: empty strings and unknown pull
    policies are carried into the generated resources unchanged. Use
    ``utils.validation.validate_args`` to check them up front.
    """

    namespace: str = DEFAULT_NAMESPACE
    imageRepository: str = Field(default=DEFAULT_IMAGE_REPOSITORY, alias="image_repository")
    controllerImageName: str = Field(
        default=DEFAULT_CONTROLLER_IMAGE, alias="controller_image_name"
    )
    importerImageName: str = Field(default=DEFAULT_IMPORTER_IMAGE, alias="importer_image_name")
    clonerImageName: str = Field(default=DEFAULT_CLONER_IMAGE, alias="cloner_image_name")
    uploadServerImageName: str = Field(
        default=DEFAULT_UPLOADSERVER_IMAGE, alias="upload_server_image_name"
    )
    imageTag: str = Field(default=DEFAULT_IMAGE_TAG, alias="image_tag")
    logVerbosity: str = Field(default=DEFAULT_VERBOSITY, alias="log_verbosity")
    imagePullPolicy: str = Field(default=DEFAULT_IMAGE_PULL_POLICY, alias="image_pull_policy")

    class Config:
        populate_by_name = True
        frozen = True

    @field_validator("imagePullPolicy", mode="before")
    @classmethod
    def _pull_policy_value(cls, value):
        if isinstance(value, PullPolicy):
            return value.value
        return value

    @classmethod
    def from_dict(cls, data: dict) -> "FactoryArgs":
        """Create args from dictionary (handles both camelCase and snake_case)."""
        return cls.model_validate(data)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "FactoryArgs":
        """Create args from the operator environment variables.

        Unset variables keep their defaults; variables set to an empty
        string are taken as empty.
        """
        if environ is None:
            environ = os.environ
        data = {field: environ[var] for var, field in ENV_FIELDS.items() if var in environ}
        return cls.model_validate(data)
