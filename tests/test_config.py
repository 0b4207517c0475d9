"""Unit tests for configuration loading."""

import logging

import pytest
from pydantic import ValidationError

from project2md.config import (
    DEFAULT_EXCLUDE_NAMES,
    DocumentationConfig,
    discover_config,
    find_config,
    load_config,
    parse_depth,
)
from project2md.exceptions import ConfigurationError


@pytest.mark.parametrize(
    "value,expected",
    [
        ("3", 3),
        (0, 0),
        ("0", 0),
        (2.0, 2),
        (2.5, None),
        ("-1", None),
        (-4, None),
        ("deep", None),
        ("", None),
        (None, None),
        (True, None),
    ],
)
def test_parse_depth(value, expected):
    assert parse_depth(value) == expected


def test_defaults():
    config = DocumentationConfig()

    assert config.exclude_names == DEFAULT_EXCLUDE_NAMES
    assert "node_modules" in config.exclude_names
    assert "vendor" in config.exclude_names
    assert config.include_package_info is True
    assert config.json_enabled is True
    assert config.project_type == "Software Project"
    assert config.max_depth is None


def test_from_mapping_accepts_hyphenated_keys():
    config = DocumentationConfig.from_mapping(
        {"exclude-names": ["vendor"], "json-enabled": False, "max-depth": "2", "framework": "django"}
    )

    assert config.exclude_names == ("vendor",)
    assert config.json_enabled is False
    assert config.max_depth == 2
    assert config.framework == "django"


@pytest.mark.parametrize(
    "data,message",
    [
        ({"colour": "blue"}, "colour: Extra inputs are not permitted"),
        ({"exclude_names": "vendor"}, "exclude_names: "),
        ({"exclude_names": ["vendor", 3]}, r"exclude_names\.1: "),
        ({"json_enabled": "yes"}, "json_enabled: "),
        ({"include-package-info": 1}, "include_package_info: "),
        ({"project_type": 12}, "project_type: "),
    ],
)
def test_from_mapping_rejects_bad_content(data, message):
    with pytest.raises(ConfigurationError, match=message):
        DocumentationConfig.from_mapping(data)


def test_config_is_frozen():
    config = DocumentationConfig()

    with pytest.raises(ValidationError):
        config.json_enabled = False


@pytest.mark.parametrize("depth,expected", [("4", 4), (-1, None), ("deep", None), (None, None)])
def test_from_mapping_depth_is_lenient(depth, expected):
    assert DocumentationConfig.from_mapping({"max_depth": depth}).max_depth == expected


def test_with_overrides_skips_none():
    config = DocumentationConfig(framework="flask").with_overrides(framework=None, database_url="sqlite://")

    assert config.framework == "flask"
    assert config.database_url == "sqlite://"


def test_load_config(tmp_path):
    path = tmp_path / "project2md.yaml"
    path.write_text(
        "exclude_names: [vendor, .git]\n"
        "include_package_info: false\n"
        "project_type: Laravel Web Application\n"
        "database_url: sqlite:///app.db\n",
        encoding="utf-8",
    )
    config = load_config(path)

    assert config.exclude_names == ("vendor", ".git")
    assert config.include_package_info is False
    assert config.project_type == "Laravel Web Application"
    assert config.database_url == "sqlite:///app.db"


def test_load_empty_config(tmp_path):
    path = tmp_path / "project2md.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(path) == DocumentationConfig()


@pytest.mark.parametrize("content", ["- a\n- b\n", "key: [unclosed\n"])
def test_load_config_invalid(tmp_path, content):
    path = tmp_path / "project2md.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_config(path)


def test_load_config_missing(tmp_path):
    with pytest.raises(ConfigurationError, match="Failed to load"):
        load_config(tmp_path / "missing.yaml")


def test_find_config(tmp_path):
    assert find_config(tmp_path) is None

    (tmp_path / ".project2md.yaml").write_text("json_enabled: false\n", encoding="utf-8")
    assert find_config(tmp_path) == tmp_path / ".project2md.yaml"

    (tmp_path / "project2md.yaml").write_text("json_enabled: true\n", encoding="utf-8")
    assert find_config(tmp_path) == tmp_path / "project2md.yaml"


def test_discover_config(tmp_path):
    assert discover_config(tmp_path) == DocumentationConfig()

    (tmp_path / "project2md.yaml").write_text("max_depth: 1\n", encoding="utf-8")
    assert discover_config(tmp_path).max_depth == 1


def test_discover_config_broken_file_warns(tmp_path, caplog):
    (tmp_path / "project2md.yaml").write_text("unknown_key: 1\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="project2md.config"):
        assert discover_config(tmp_path) == DocumentationConfig()
    assert "Ignoring configuration file" in caplog.text
