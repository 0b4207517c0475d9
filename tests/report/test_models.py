"""Unit tests for report data models."""

import pytest

from project2md.report.models import (
    UNAVAILABLE,
    UNKNOWN,
    Manifest,
    PackageInfo,
    VersionInfo,
    normalize_package_name,
)


@pytest.mark.parametrize(
    "name,expected",
    [
        ("Django", "django"),
        ("Flask_SQLAlchemy", "flask-sqlalchemy"),
        ("zope.interface", "zope-interface"),
        ("a--b__c", "a-b-c"),
        ("laravel/framework", "laravel/framework"),
    ],
)
def test_normalize_package_name(name, expected):
    assert normalize_package_name(name) == expected


def test_manifest_find_version():
    manifest = Manifest("poetry.lock", [PackageInfo("Django", "5.0.1"), PackageInfo("PyYAML", "6.0.1")])

    assert manifest.find_version("django") == "5.0.1"
    assert manifest.find_version("pyyaml") == "6.0.1"
    assert manifest.find_version("flask") is None


def test_version_info_defaults():
    versions = VersionInfo()

    assert versions.framework == UNKNOWN
    assert versions.runtime == UNKNOWN
    assert versions.database == UNAVAILABLE
    assert versions.framework_name == "Framework"
    assert versions.runtime_name == "Python"
