"""Actionable error catalog for drone-bazelisk-ecr."""

from typing import Dict

_ERROR_MESSAGES: Dict[str, Dict[str, str]] = {
    "missing_required": {
        "what": "Missing required setting `{key}`.",
        "next": "Set `{setting}` in the plugin `settings` block of the pipeline step.",
    },
    "invalid_bool": {
        "what": "Setting `{key}` has invalid boolean value `{value}`.",
        "next": "Use one of `true`, `false`, `1`, `0`, `t` or `f`.",
    },
    "invalid_string": {
        "what": "Setting `{key}` in the config file must be a string, got `{value}`.",
        "next": "Quote the value in the YAML file, e.g. `{key}: \"{value}\"`.",
    },
    "malformed_registry": {
        "what": "Could not parse region from registry: {registry}",
        "next": "Use the full ECR hostname, e.g. `<account>.dkr.ecr.<region>.amazonaws.com`.",
    },
    "missing_repository": {
        "what": "Must specify a repository when `create_repository` is enabled.",
        "next": "Set the `repository` setting or disable `create_repository`.",
    },
    "registry_mismatch": {
        "what": "Provided credentials are not for the specified registry: {registry}",
        "next": "Check that the access key belongs to the account and region of `{registry}`.",
    },
    "command_not_found": {
        "what": "Required command not found: {command}.",
        "next": "Run the plugin in an image that provides `{command}` (for example bazelisk).",
    },
}


def actionable_error(code: str, **kwargs: str) -> str:
    if code not in _ERROR_MESSAGES:
        raise KeyError(f"Unknown error catalog key: {code}")

    template = _ERROR_MESSAGES[code]
    what = template["what"].format(**kwargs)
    next_step = template["next"].format(**kwargs)
    return f"{what} Suggested action: {next_step}"
