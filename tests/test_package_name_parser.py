"""Tests for sbt package name parsing."""

import pytest

from versioning.models import InvalidPackageNameError, PackageIdentity
from versioning.parser import group_path, parse_package_name


class TestParsePackageName:
    """group:artifact[_scala] splitting."""

    def test_with_scala_version(self):
        assert parse_package_name("com.example:my-plugin_2.12") == PackageIdentity(
            group_id="com.example",
            artifact_id="my-plugin_2.12",
            artifact="my-plugin",
            scala_version="2.12",
        )

    def test_without_scala_version(self):
        identity = parse_package_name("org.scala-sbt:sbt-native-packager")
        assert identity.artifact == "sbt-native-packager"
        assert identity.scala_version is None
        assert identity.package_name == "org.scala-sbt:sbt-native-packager"

    def test_extra_underscore_segments_are_ignored(self):
        identity = parse_package_name("com.example:lib_2.12_1.0")
        assert identity.artifact == "lib"
        assert identity.scala_version == "2.12"

    @pytest.mark.parametrize("name", [
        "com.example",
        "com.example:lib:1.0.0",
        ":lib",
        "com.example:",
        "",
    ])
    def test_malformed_names_raise(self, name):
        with pytest.raises(InvalidPackageNameError):
            parse_package_name(name)

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_package_name("nope")


def test_group_path():
    assert group_path("com.example.sub", ".") == "com.example.sub"
    assert group_path("com.example.sub", "/") == "com/example/sub"
