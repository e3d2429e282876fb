"""
Tests for version file parsing
"""
import json

import pytest

from app.exceptions import VersionParseError
from domain.changelog.version_source import read_version_from_file


def write(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


class TestPackageJson:
    """JSON metadata files."""

    def test_read_version(self, tmp_path):
        path = write(tmp_path, "package.json", json.dumps({"version": "1.2.3"}))

        assert read_version_from_file(path) == "1.2.3"

    def test_trim_version(self, tmp_path):
        path = write(tmp_path, "package.json", json.dumps({"version": "  1.2.3  "}))

        assert read_version_from_file(path) == "1.2.3"

    def test_invalid_json(self, tmp_path):
        path = write(tmp_path, "package.json", "{ invalid json }")

        with pytest.raises(VersionParseError, match="Invalid JSON in .*package.json"):
            read_version_from_file(path)

    def test_missing_version_field(self, tmp_path):
        path = write(tmp_path, "package.json", json.dumps({"name": "test-package"}))

        with pytest.raises(VersionParseError, match="No 'version' field found"):
            read_version_from_file(path)

    def test_empty_version_field(self, tmp_path):
        path = write(tmp_path, "package.json", json.dumps({"version": ""}))

        with pytest.raises(VersionParseError, match="No 'version' field found"):
            read_version_from_file(path)

    def test_blank_version_field(self, tmp_path):
        path = write(tmp_path, "package.json", json.dumps({"version": "   "}))

        with pytest.raises(VersionParseError, match="Empty 'version' field"):
            read_version_from_file(path)

    def test_non_object_json(self, tmp_path):
        path = write(tmp_path, "package.json", json.dumps(["1.0.0"]))

        with pytest.raises(VersionParseError, match="No 'version' field found"):
            read_version_from_file(path)

    def test_non_string_version(self, tmp_path):
        path = write(tmp_path, "package.json", json.dumps({"version": 2}))

        with pytest.raises(VersionParseError, match="must be a string"):
            read_version_from_file(path)

    def test_other_json_metadata_file(self, tmp_path):
        """Any .json file is parsed as JSON metadata."""
        path = write(tmp_path, "composer.json", json.dumps({"version": "4.5.6"}))

        assert read_version_from_file(path) == "4.5.6"


class TestTextVersionFile:
    """Plain text version files."""

    def test_single_line(self, tmp_path):
        path = write(tmp_path, "VERSION", "2.0.0")

        assert read_version_from_file(path) == "2.0.0"

    def test_first_line_of_multi_line_file(self, tmp_path):
        path = write(tmp_path, "VERSION", "3.0.0\nsome other content\n")

        assert read_version_from_file(path) == "3.0.0"

    def test_trim_whitespace(self, tmp_path):
        path = write(tmp_path, "VERSION", "  1.5.0  \n")

        assert read_version_from_file(path) == "1.5.0"

    def test_skip_leading_blank_lines(self, tmp_path):
        """First non-empty line is the version."""
        path = write(tmp_path, "version.txt", "\n   \n4.0.0-rc.1\n")

        assert read_version_from_file(path) == "4.0.0-rc.1"

    def test_empty_file(self, tmp_path):
        path = write(tmp_path, "VERSION", "")

        with pytest.raises(VersionParseError, match="Empty version file"):
            read_version_from_file(path)

    def test_whitespace_only_file(self, tmp_path):
        path = write(tmp_path, "VERSION", "   \n  \n")

        with pytest.raises(VersionParseError, match="Empty version file"):
            read_version_from_file(path)


class TestUnreadableFile:

    def test_missing_file(self, tmp_path):
        with pytest.raises(VersionParseError, match="Failed to read version from"):
            read_version_from_file(tmp_path / "VERSION")
