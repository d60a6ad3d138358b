"""Bazel argument assembly for drone-bazelisk-ecr."""

from typing import List

from bazeliskecr.constants import (
    BES_KEYWORD_KEYS,
    BES_KEYWORD_PREFIX,
    BES_KEYWORDS_FLAG,
    DEFAULT_COMMAND,
)
from bazeliskecr.models import BuildMetadata, PluginConfig


def join_flag(flag: str, value: str) -> str:
    return f"{flag}={value}"


class InvocationBuilder:
    """Translates plugin settings into the bazel argument list.

    Setting values are appended as single arguments. ``command_args`` and
    ``target_args`` are never split on whitespace, so ``"--config=ci -c opt"``
    reaches bazel as one argument.
    """

    def build_args(self, config: PluginConfig, metadata: BuildMetadata) -> List[str]:
        args: List[str] = []

        # startup options must precede the command
        if config.bazelrc:
            args.append(join_flag("--bazelrc", config.bazelrc))

        args.append(config.command or DEFAULT_COMMAND)

        if config.engflow_bes_keywords:
            args.extend(self.bes_keywords(metadata))

        if config.command_args:
            args.extend([config.command_args, config.target])
        else:
            args.append(config.target)

        if config.target_args:
            args.extend(["--", config.target_args])

        return args

    def bes_keywords(self, metadata: BuildMetadata) -> List[str]:
        return [
            join_flag(BES_KEYWORDS_FLAG, f"{BES_KEYWORD_PREFIX}{key}={value}")
            for key, value in zip(BES_KEYWORD_KEYS, metadata.values())
        ]
