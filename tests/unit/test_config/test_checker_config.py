"""
Unit tests for checker configuration validation and loading.

Tests option normalization, defaults, TOML loading and the process-wide
configuration singleton.
"""

import re

import pytest
import toml

from propguard.config import (
    CONFIG_ENV_VAR,
    build_checker_config,
    clear_config_cache,
    get_config,
    get_config_info,
    is_config_loaded,
    load_checker_config,
    normalize_options,
    set_config_path,
    starter_config_data,
    validate_checker_config,
    write_starter_config,
)
from propguard.models import CheckerConfig, NamePattern, PatternKind
from propguard.validation import ValidationError
from propguard.whitelist import WHITELIST


@pytest.mark.unit
class TestBuildCheckerConfig:
    """Test cases for option validation."""

    def test_defaults(self, default_config):
        assert default_config.max_distance == 2
        assert default_config.warn_undeclared is True
        assert default_config.include == (NamePattern.from_regex("."),)
        assert default_config.exclude == (NamePattern.from_regex("[^a-zA-Z0-9]"),)
        assert default_config.whitelist == WHITELIST["all"]

    def test_config_is_immutable(self, default_config):
        with pytest.raises(AttributeError):
            default_config.max_distance = 5

    @pytest.mark.parametrize("value", [-1, "abc", True, 1.5, None])
    def test_invalid_max_distance(self, value):
        with pytest.raises(ValidationError) as exc_info:
            build_checker_config(max_distance=value)

        assert "max_distance" in str(exc_info.value)

    def test_max_distance_zero_allowed(self):
        assert build_checker_config(max_distance=0).max_distance == 0

    def test_invalid_warn_undeclared(self):
        with pytest.raises(ValidationError) as exc_info:
            build_checker_config(warn_undeclared="yes")

        assert "warn_undeclared" in str(exc_info.value)

    def test_malformed_patterns_degrade(self):
        config = build_checker_config(include=[{"regex": "("}, "Good"])
        assert [p.kind for p in config.include] == [PatternKind.NEVER, PatternKind.LITERAL]

    def test_scalar_options(self):
        config = build_checker_config(include="Only", exclude=re.compile("^X"))
        assert config.include == (NamePattern.literal("Only"),)
        assert config.exclude[0].kind is PatternKind.REGEX

    def test_whitelist_table(self):
        config = build_checker_config(whitelist={"categories": ["event-handlers"], "extra": ["testId"]})
        assert config.whitelist == WHITELIST["event-handlers"] + (NamePattern.literal("testId"),)

    def test_whitelist_table_without_categories(self):
        config = build_checker_config(whitelist={"extra": ["testId"]})
        assert config.whitelist == (NamePattern.literal("testId"),)

    def test_whitelist_table_unknown_key(self):
        with pytest.raises(ValidationError):
            build_checker_config(whitelist={"categories": ["all"], "bogus": 1})

    def test_whitelist_composed_from_export(self):
        config = build_checker_config(whitelist=[*WHITELIST["all"], "myProp"])
        assert config.whitelist[-1] == NamePattern.literal("myProp")
        assert len(config.whitelist) == len(WHITELIST["all"]) + 1

    def test_checker_config_rejects_negative_distance(self):
        with pytest.raises(ValueError):
            CheckerConfig(include=(), exclude=(), whitelist=(), max_distance=-1)


@pytest.mark.unit
class TestNormalizeOptions:
    """Test cases for option mappings."""

    def test_empty_mapping_gives_defaults(self, default_config):
        assert normalize_options({}) == default_config

    def test_unknown_option(self):
        with pytest.raises(ValidationError) as exc_info:
            normalize_options({"maxDistance": 3})

        assert "maxDistance" in str(exc_info.value)

    def test_identical_options_give_equal_configs(self):
        options = {"include": [re.compile("^A")], "max_distance": 1}
        assert normalize_options(options) == normalize_options(options)


@pytest.mark.unit
class TestTomlLoading:
    """Test cases for configuration files."""

    def test_validate_checker_config(self, sample_checker_data):
        config = validate_checker_config({"checker": sample_checker_data})

        assert config.max_distance == 1
        assert config.include[0] == NamePattern.from_regex("^Include")
        assert config.include[1] == NamePattern.literal("PatchMe")

    def test_missing_checker_table_gives_defaults(self, default_config):
        assert validate_checker_config({}) == default_config

    def test_checker_must_be_table(self):
        with pytest.raises(ValidationError):
            validate_checker_config({"checker": 3})

    def test_load_checker_config(self, config_file):
        config = load_checker_config(config_file)

        assert config.exclude[1] == NamePattern.literal("DoNotPatchMe")
        assert config.whitelist[-1] == NamePattern.from_regex("^x-")

    def test_missing_file(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            load_checker_config(temp_dir / "missing.toml")

    def test_shipped_config_matches_defaults(self, default_config):
        from pathlib import Path

        shipped = Path(__file__).parents[3] / "conf" / "propguard.toml"
        assert load_checker_config(shipped) == default_config

    def test_starter_config_round_trips_to_defaults(self, temp_dir, default_config):
        path = write_starter_config(temp_dir / "nested" / "propguard.toml")

        assert load_checker_config(path) == default_config
        assert toml.load(path) == starter_config_data()

    def test_starter_config_will_not_overwrite(self, temp_dir):
        path = write_starter_config(temp_dir / "propguard.toml")
        with pytest.raises(FileExistsError):
            write_starter_config(path)
        write_starter_config(path, overwrite=True)


@pytest.mark.unit
class TestConfigManager:
    """Test cases for the configuration singleton."""

    def test_defaults_without_file(self, default_config, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert get_config() == default_config
        assert is_config_loaded()

    def test_config_is_cached(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert get_config() is get_config()
        clear_config_cache()
        assert not is_config_loaded()

    def test_set_config_path(self, config_file):
        set_config_path(config_file)
        assert get_config().max_distance == 1
        assert get_config_info()["config_path"] == str(config_file)

    def test_environment_variable(self, config_file, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
        clear_config_cache()
        assert get_config().max_distance == 1

    def test_explicit_path_beats_environment(self, config_file, temp_dir, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(temp_dir / "missing.toml"))
        set_config_path(config_file)
        assert get_config().max_distance == 1

    def test_missing_configured_file(self, temp_dir, caplog):
        set_config_path(temp_dir / "missing.toml")
        with pytest.raises(FileNotFoundError):
            get_config()
        assert "loading checker configuration" in caplog.text
