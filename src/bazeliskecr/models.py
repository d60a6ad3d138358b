"""Shared domain models for drone-bazelisk-ecr."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Tuple

from .constants import (
    DEFAULT_COMMAND,
    DRONE_BUILD_LINK,
    DRONE_COMMIT,
    DRONE_COMMIT_BRANCH,
    DRONE_REPO_LINK,
    DRONE_STAGE_NAME,
    DRONE_STEP_NAME,
)


@dataclass(frozen=True)
class PluginConfig:
    """Plugin settings resolved once at startup."""

    target: str
    registry: str
    create_repository: bool = False
    repository: str = ""
    tag: str = ""
    access_key: str = field(default="", repr=False)
    secret_key: str = field(default="", repr=False)
    bazelrc: str = ""
    command: str = DEFAULT_COMMAND
    command_args: str = ""
    engflow_bes_keywords: bool = False
    target_args: str = ""

    @property
    def has_credentials(self) -> bool:
        return bool(self.access_key and self.secret_key)


@dataclass(frozen=True)
class BuildMetadata:
    """Facts about the current CI run, used to tag the build event stream."""

    pipeline_name: str = ""
    job_name: str = ""
    uri: str = ""
    scm_remote: str = ""
    scm_branch: str = ""
    scm_revision: str = ""

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> "BuildMetadata":
        return cls(
            pipeline_name=environ.get(DRONE_STAGE_NAME, ""),
            job_name=environ.get(DRONE_STEP_NAME, ""),
            uri=environ.get(DRONE_BUILD_LINK, ""),
            scm_remote=environ.get(DRONE_REPO_LINK, ""),
            scm_branch=environ.get(DRONE_COMMIT_BRANCH, ""),
            scm_revision=environ.get(DRONE_COMMIT, ""),
        )

    def values(self) -> Tuple[str, ...]:
        return (
            self.pipeline_name,
            self.job_name,
            self.uri,
            self.scm_remote,
            self.scm_branch,
            self.scm_revision,
        )


class ProvisionOutcome(Enum):
    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
