"""Subprocess execution service for drone-bazelisk-ecr."""

import subprocess
from typing import List, Mapping, Optional

from bazeliskecr.errors import ExecutionFailed
from bazeliskecr.errors_catalog import actionable_error

COMMAND_NOT_FOUND_RETURNCODE = 127


class CommandRunner:
    """Runs the build tool with inherited output streams and consistent error handling."""

    def __init__(self, logger, subprocess_module=subprocess):
        self.logger = logger
        self.subprocess = subprocess_module

    def run(self, cmd: List[str], env: Optional[Mapping[str, str]] = None) -> int:
        cmd_str = " ".join(cmd)
        self.logger.debug("Executing: %s", cmd_str)

        try:
            result = self.subprocess.run(cmd, env=dict(env) if env is not None else None)
        except FileNotFoundError as exc:
            raise ExecutionFailed(
                actionable_error("command_not_found", command=cmd[0]),
                returncode=COMMAND_NOT_FOUND_RETURNCODE,
            ) from exc
        except OSError as exc:
            raise ExecutionFailed(f"Failed to execute command: {cmd_str}. {exc}") from exc

        if result.returncode != 0:
            raise ExecutionFailed(
                f"Command failed ({result.returncode}): {cmd_str}",
                returncode=result.returncode,
            )

        return result.returncode
