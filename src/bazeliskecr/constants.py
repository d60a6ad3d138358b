"""Shared constants for drone-bazelisk-ecr."""

ENV_PREFIX = "PLUGIN_"
EXPORT_PREFIX = "DRONE_ECR"

BAZEL_BINARY = "bazel"
DEFAULT_COMMAND = "run"
DEFAULT_CONFIG_FILE = ".drone-bazelisk-ecr.yml"

HTTPS_PREFIX = "https://"
REPOSITORY_EXISTS_CODE = "RepositoryAlreadyExistsException"

AWS_ACCESS_KEY_ENV = "AWS_ACCESS_KEY_ID"
AWS_SECRET_KEY_ENV = "AWS_SECRET_ACCESS_KEY"

# Drone CI variables describing the current build
DRONE_STAGE_NAME = "DRONE_STAGE_NAME"
DRONE_STEP_NAME = "DRONE_STEP_NAME"
DRONE_BUILD_LINK = "DRONE_BUILD_LINK"
DRONE_REPO_LINK = "DRONE_REPO_LINK"
DRONE_COMMIT_BRANCH = "DRONE_COMMIT_BRANCH"
DRONE_COMMIT = "DRONE_COMMIT"

BES_KEYWORDS_FLAG = "--bes_keywords"
BES_KEYWORD_PREFIX = "engflow:"
BES_KEYWORD_KEYS = (
    "CiCdPipelineName",
    "CiCdJobName",
    "CiCdUri",
    "BuildScmRemote",
    "BuildScmBranch",
    "BuildScmRevision",
)
