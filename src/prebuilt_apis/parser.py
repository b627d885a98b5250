"""Parse prebuilt artifact paths into (module, version, scope) identities."""

from __future__ import annotations

import re

from prebuilt_apis.models import (
    API_FILE_SCOPES,
    ApiFileIdentity,
    Invalid,
    JAR_SCOPES,
    JarIdentity,
    Skipped,
)


_VERSION_RE = re.compile(r"[0-9]+")


def _strip_suffix(name: str, suffix: str) -> str:
    if name.endswith(suffix):
        return name[: -len(suffix)]
    return name


def parse_jar_path(path: str) -> JarIdentity | Skipped:
    """Parse a jar path of the form `<version>/<scope>/<module>.jar`.

    The version is kept as an opaque string. Jars in an unknown scope are
    skipped rather than reported, since unrelated jars may live in the tree.

    Args:
        path: Path relative to the meta-module directory.

    Returns:
        A `JarIdentity`, or `Skipped` when the path does not follow the layout.
    """
    elements = path.split("/")
    if len(elements) != 3:
        return Skipped(path=path, reason=f"expected 3 path elements, got {len(elements)}")

    version, scope, filename = elements
    if scope not in JAR_SCOPES:
        return Skipped(path=path, reason=f"unknown scope {scope!r}")

    module = _strip_suffix(filename, ".jar")
    if not module:
        return Skipped(path=path, reason="empty module name")

    return JarIdentity(module=module, version=version, scope=scope, path=path)


def parse_api_file_path(path: str) -> ApiFileIdentity | Invalid:
    """Parse an API file path of the form `<version>/<scope>/api/<module>.txt`.

    Unlike jars, a malformed API file is an error: the version must be a
    non-negative decimal integer and the scope one of public, system or test.
    The third element is always `api` by construction of the glob and is not
    checked.

    Args:
        path: Path relative to the meta-module directory.

    Returns:
        An `ApiFileIdentity`, or `Invalid` describing the first problem found.
    """
    elements = path.split("/")
    if len(elements) != 4:
        return Invalid(path=path, reason=f"invalid api file path: {path!r}")

    raw_version, scope, _, filename = elements
    if not _VERSION_RE.fullmatch(raw_version):
        return Invalid(path=path, reason=f'invalid version "{raw_version}" found in path: "{path}"')

    if scope not in API_FILE_SCOPES:
        return Invalid(path=path, reason=f'invalid scope "{scope}" found in path: "{path}"')

    module = _strip_suffix(filename, ".txt")
    if not module:
        return Invalid(path=path, reason=f'empty module name found in path: "{path}"')

    return ApiFileIdentity(module=module, version=int(raw_version), scope=scope, path=path)
