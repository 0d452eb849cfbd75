import pytest

from codeanalyzer.config import Config, validate_threshold
from codeanalyzer.errors import ConfigError
from codeanalyzer.utils.settings import DEFAULT_EXCLUDE_PATTERNS


def test_defaults():
    config = Config()
    assert config.long_method_threshold == 50
    assert config.magic_number_allow_list == ["-1", "0", "1", "2"]
    assert config.extensions == [".cs"]
    assert config.disabled_rules == []
    assert "*/obj/*" in config.exclude_patterns


def test_load_without_any_file_gives_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert Config.load() == Config()


def test_load_toml(tmp_path):
    path = tmp_path / "codeanalyzer.toml"
    path.write_text(
        'long_method_threshold = 30\n'
        'magic_number_allow_list = ["0", "1", "100"]\n'
        'disabled_rules = ["dead-code"]\n'
        'exclude_patterns = ["*/Migrations/*"]\n'
        'extensions = ["cs", ".csx"]\n'
    )
    config = Config.load(str(path))
    assert config.long_method_threshold == 30
    assert config.magic_number_allow_list == ["0", "1", "100"]
    assert config.disabled_rules == ["dead-code"]
    assert config.exclude_patterns == DEFAULT_EXCLUDE_PATTERNS + ["*/Migrations/*"]
    assert config.extensions == [".cs", ".csx"]


def test_load_pyproject_section_only(tmp_path, monkeypatch):
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "x"\n\n[tool.codeanalyzer]\nlong-method-threshold = 12\n'
    )
    monkeypatch.chdir(tmp_path)
    assert Config.load().long_method_threshold == 12


def test_load_yaml(tmp_path):
    path = tmp_path / ".codeanalyzer.yaml"
    path.write_text("long_method_threshold: 25\ndisabled_rules:\n  - naming\n")
    config = Config.load(str(path))
    assert config.long_method_threshold == 25
    assert config.disabled_rules == ["naming"]


def test_load_setup_cfg(tmp_path):
    path = tmp_path / "setup.cfg"
    path.write_text("[tool:codeanalyzer]\nlong_method_threshold = 40\ndisabled_rules = naming, dead-code\n")
    config = Config.load(str(path))
    assert config.long_method_threshold == 40
    assert config.disabled_rules == ["naming", "dead-code"]


def test_malformed_file_raises_config_error(tmp_path):
    path = tmp_path / "codeanalyzer.toml"
    path.write_text("long_method_threshold = = 3\n")
    with pytest.raises(ConfigError):
        Config.load(str(path))


def test_bad_values_raise_config_error(tmp_path):
    path = tmp_path / "codeanalyzer.yaml"
    path.write_text("long_method_threshold: many\n")
    with pytest.raises(ConfigError):
        Config.load(str(path))
    with pytest.raises(ConfigError):
        Config(magic_number_allow_list=["zero"])


@pytest.mark.parametrize("value", [0, -1, None, "3", 1.5, False])
def test_validate_threshold_rejects(value):
    with pytest.raises(ValueError):
        validate_threshold(value)


def test_validate_threshold_accepts_positive_int():
    assert validate_threshold(1) == 1
