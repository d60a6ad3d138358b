import pytest

from bazeliskecr.errors import ConfigInvalidValue, ConfigMissingRequired
from bazeliskecr.services.config_loader import ConfigLoader

BASE_ENV = {
    "PLUGIN_TARGET": "//images:push",
    "PLUGIN_REGISTRY": "123.dkr.ecr.us-east-1.amazonaws.com",
}


def test_config_loader_reads_plugin_environment():
    environ = dict(
        BASE_ENV,
        PLUGIN_CREATE_REPOSITORY="true",
        PLUGIN_REPOSITORY="service",
        PLUGIN_TAG="abc123",
        PLUGIN_ACCESS_KEY="AKIA",
        PLUGIN_SECRET_KEY="secret",
        PLUGIN_BAZELRC=".bazelrc.ci",
        PLUGIN_COMMAND="build",
        PLUGIN_COMMAND_ARGS="--config=ci",
        PLUGIN_ENGFLOW_BES_KEYWORDS="1",
        PLUGIN_TARGET_ARGS="--flag",
    )

    config = ConfigLoader().load(environ)

    assert config.target == "//images:push"
    assert config.registry == "123.dkr.ecr.us-east-1.amazonaws.com"
    assert config.create_repository is True
    assert config.repository == "service"
    assert config.tag == "abc123"
    assert config.has_credentials is True
    assert config.bazelrc == ".bazelrc.ci"
    assert config.command == "build"
    assert config.command_args == "--config=ci"
    assert config.engflow_bes_keywords is True
    assert config.target_args == "--flag"


def test_config_loader_applies_defaults():
    config = ConfigLoader().load(BASE_ENV)

    assert config.command == "run"
    assert config.create_repository is False
    assert config.engflow_bes_keywords is False
    assert config.repository == ""


def test_config_loader_hides_credentials_from_repr():
    environ = dict(BASE_ENV, PLUGIN_ACCESS_KEY="AKIA", PLUGIN_SECRET_KEY="topsecret")

    config = ConfigLoader().load(environ)

    assert "topsecret" not in repr(config)
    assert "AKIA" not in repr(config)


@pytest.mark.parametrize("missing", ["PLUGIN_TARGET", "PLUGIN_REGISTRY"])
def test_config_loader_requires_target_and_registry(missing):
    environ = dict(BASE_ENV)
    environ.pop(missing)

    with pytest.raises(ConfigMissingRequired, match=missing):
        ConfigLoader().load(environ)


def test_config_loader_rejects_invalid_boolean():
    environ = dict(BASE_ENV, PLUGIN_CREATE_REPOSITORY="yes")

    with pytest.raises(ConfigInvalidValue, match="PLUGIN_CREATE_REPOSITORY"):
        ConfigLoader().load(environ)


@pytest.mark.parametrize("value", ["", "0", "f", "FALSE", "False"])
def test_config_loader_parses_false_values(value):
    environ = dict(BASE_ENV, PLUGIN_ENGFLOW_BES_KEYWORDS=value)

    assert ConfigLoader().load(environ).engflow_bes_keywords is False


def test_config_loader_environment_overrides_yaml(tmp_path):
    config_file = tmp_path / ".drone-bazelisk-ecr.yml"
    config_file.write_text(
        "target: //from:file\n"
        "registry: 123.dkr.ecr.eu-west-1.amazonaws.com\n"
        "create_repository: true\n"
        "command: test\n",
        encoding="utf-8",
    )

    config = ConfigLoader().load({"PLUGIN_TARGET": "//from:env"}, str(config_file))

    assert config.target == "//from:env"
    assert config.registry == "123.dkr.ecr.eu-west-1.amazonaws.com"
    assert config.create_repository is True
    assert config.command == "test"


def test_config_loader_rejects_unknown_yaml_keys(tmp_path):
    config_file = tmp_path / ".drone-bazelisk-ecr.yml"
    config_file.write_text("unknown_key: true\n", encoding="utf-8")

    with pytest.raises(ConfigInvalidValue, match="Unknown configuration keys"):
        ConfigLoader().load(BASE_ENV, str(config_file))


def test_config_loader_rejects_missing_yaml_file(tmp_path):
    with pytest.raises(ConfigInvalidValue, match="Config file not found"):
        ConfigLoader().load(BASE_ENV, str(tmp_path / "missing.yml"))


def test_config_loader_rejects_non_mapping_yaml(tmp_path):
    config_file = tmp_path / ".drone-bazelisk-ecr.yml"
    config_file.write_text("- target\n- registry\n", encoding="utf-8")

    with pytest.raises(ConfigInvalidValue, match="YAML mapping"):
        ConfigLoader().load(BASE_ENV, str(config_file))


@pytest.mark.parametrize("line", ["tag: 1.10\n", "tag: 001\n", "command_args: true\n"])
def test_config_loader_rejects_unquoted_yaml_scalars(tmp_path, line):
    config_file = tmp_path / ".drone-bazelisk-ecr.yml"
    config_file.write_text(line, encoding="utf-8")

    with pytest.raises(ConfigInvalidValue, match="must be a string"):
        ConfigLoader().load(BASE_ENV, str(config_file))


def test_config_loader_keeps_quoted_yaml_scalars(tmp_path):
    config_file = tmp_path / ".drone-bazelisk-ecr.yml"
    config_file.write_text('tag: "1.10"\n', encoding="utf-8")

    assert ConfigLoader().load(BASE_ENV, str(config_file)).tag == "1.10"
