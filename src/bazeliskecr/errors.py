"""Domain errors for drone-bazelisk-ecr."""


class PluginError(RuntimeError):
    """Raised when the plugin run cannot continue safely."""


class ConfigMissingRequired(PluginError):
    """A required plugin setting was not provided."""


class ConfigInvalidValue(PluginError):
    """A plugin setting could not be parsed."""


class MalformedRegistryHost(PluginError):
    """The registry hostname does not carry a region segment."""


class MissingRepositoryName(PluginError):
    """Repository creation was requested without a repository name."""


class RegistryMismatch(PluginError):
    """The credentials are authorized for a different registry."""


class ProvisioningFailed(PluginError):
    """The registry rejected or failed the repository provisioning calls."""


class ExecutionFailed(PluginError):
    """The build tool could not be launched or exited with a failure."""

    def __init__(self, message: str, returncode: int = 1):
        super().__init__(message)
        self.returncode = returncode
