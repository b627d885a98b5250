from __future__ import annotations

import pytest

from prebuilt_apis.models import ApiFileIdentity, Invalid, JarIdentity, Skipped
from prebuilt_apis.parser import parse_api_file_path, parse_jar_path


@pytest.mark.parametrize("scope", ["public", "system", "test", "core"])
def test_parse_jar_path_known_scopes(scope: str) -> None:
    parsed = parse_jar_path(f"28/{scope}/android.jar")

    assert isinstance(parsed, JarIdentity)
    assert parsed.module == "android"
    assert parsed.version == "28"
    assert parsed.scope == scope
    assert parsed.path == f"28/{scope}/android.jar"


def test_parse_jar_path_keeps_version_opaque() -> None:
    parsed = parse_jar_path("current/public/android.jar")

    assert isinstance(parsed, JarIdentity)
    assert parsed.version == "current"


def test_parse_jar_path_unknown_scope_is_skipped() -> None:
    parsed = parse_jar_path("28/vendor/android.jar")

    assert isinstance(parsed, Skipped)
    assert "vendor" in parsed.reason


def test_parse_jar_path_wrong_depth_is_skipped() -> None:
    assert isinstance(parse_jar_path("public/android.jar"), Skipped)
    assert isinstance(parse_jar_path("28/public/extra/android.jar"), Skipped)


def test_parse_api_file_path() -> None:
    parsed = parse_api_file_path("28/system/api/android.txt")

    assert isinstance(parsed, ApiFileIdentity)
    assert parsed.module == "android"
    assert parsed.version == 28
    assert parsed.scope == "system"
    assert parsed.key == "android.system"


def test_parse_api_file_path_version_is_numeric() -> None:
    parsed = parse_api_file_path("007/public/api/foo.txt")

    assert isinstance(parsed, ApiFileIdentity)
    assert parsed.version == 7
    assert parsed.path == "007/public/api/foo.txt"


@pytest.mark.parametrize("version", ["current", "1.0", "-1", "+3", ""])
def test_parse_api_file_path_invalid_version(version: str) -> None:
    path = f"{version}/public/api/foo.txt"
    parsed = parse_api_file_path(path)

    assert isinstance(parsed, Invalid)
    assert parsed.reason == f'invalid version "{version}" found in path: "{path}"'


def test_parse_api_file_path_core_scope_is_invalid() -> None:
    parsed = parse_api_file_path("28/core/api/foo.txt")

    assert isinstance(parsed, Invalid)
    assert parsed.reason == 'invalid scope "core" found in path: "28/core/api/foo.txt"'


def test_parse_api_file_path_wrong_depth_is_invalid() -> None:
    assert isinstance(parse_api_file_path("28/public/foo.txt"), Invalid)
