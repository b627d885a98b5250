"""Generate java_import and filegroup declarations for a prebuilt_apis module.

A `prebuilt_apis` meta-module owns a directory laid out as::

    <version>/<scope>/<module>.jar
    <version>/<scope>/api/<module>.txt

Every jar becomes a java_import named `sdk_<scope>_<version>_<module>`.
Every API file becomes a filegroup named `<module>.api.<scope>.<version>`,
and each (module, scope) pair additionally gets `<module>.api.<scope>.latest`
pointing at its highest version.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from prebuilt_apis.exceptions import NoArtifactsFoundError
from prebuilt_apis.host import BuildHost
from prebuilt_apis.models import (
    ApiFileIdentity,
    Diagnostic,
    FileGroupDeclaration,
    GenerationReport,
    ImportDeclaration,
    Invalid,
    LATEST,
    PrebuiltApisModule,
    SDK_VERSION_PLACEHOLDER,
    Skipped,
)
from prebuilt_apis.parser import parse_api_file_path, parse_jar_path


logger = logging.getLogger(__name__)

JAR_PATTERN = "*/*/*.jar"
API_FILE_PATTERN = "*/*/api/*.txt"


def import_name(module: str, scope: str, version: str) -> str:
    return f"sdk_{scope}_{version}_{module}"


def filegroup_name(module: str, scope: str, version: str) -> str:
    return f"{module}.api.{scope}.{version}"


def create_import(host: BuildHost, module: str, scope: str, version: str, path: str) -> ImportDeclaration:
    """Register a java_import wrapping one prebuilt jar."""
    decl = ImportDeclaration(
        name=import_name(module, scope, version),
        jars=[path],
        sdk_version=SDK_VERSION_PLACEHOLDER,
        installable=False,
    )
    host.register(decl)
    return decl


def create_filegroup(host: BuildHost, module: str, scope: str, version: str, path: str) -> FileGroupDeclaration:
    """Register a filegroup naming one API file."""
    decl = FileGroupDeclaration(name=filegroup_name(module, scope, version), srcs=[path])
    host.register(decl)
    return decl


@dataclass
class _Latest:
    module: str
    scope: str
    version: int
    path: str


class LatestVersionIndex:
    """Track the highest API version seen per `module.scope` key.

    A later identity replaces the current entry only when its version is
    strictly greater, so on a tie the first one added wins.
    """

    def __init__(self) -> None:
        self._entries: dict[str, _Latest] = {}

    def add(self, identity: ApiFileIdentity) -> None:
        key = identity.key
        current = self._entries.get(key)
        if current is None or identity.version > current.version:
            self._entries[key] = _Latest(identity.module, identity.scope, identity.version, identity.path)

    def items(self) -> Iterator[tuple[str, _Latest]]:
        """Yield (key, entry) pairs in sorted key order."""
        for key in sorted(self._entries):
            yield key, self._entries[key]


def _relative(files: Iterable[str], prefix: str) -> list[str]:
    out: list[str] = []
    for f in files:
        out.append(f[len(prefix):] if prefix and f.startswith(prefix) else f)
    return sorted(out)


def prebuilt_api_files(
    host: BuildHost,
    module: PrebuiltApisModule,
    files: Iterable[str],
    report: GenerationReport,
) -> None:
    """Create a filegroup per API file, then one `latest` filegroup per key.

    Args:
        host: Build host receiving the declarations.
        module: The meta-module being expanded.
        files: Globbed API file paths, prefixed with the module directory.
        report: Collects declarations and per-path diagnostics.
    """
    index = LatestVersionIndex()

    for path in _relative(files, module.prefix()):
        parsed = parse_api_file_path(path)
        if isinstance(parsed, Invalid):
            diag = Diagnostic(module=module.name, path=path, message=parsed.reason)
            logger.error("%s", diag.label())
            report.diagnostics.append(diag)
            continue

        report.declarations.append(
            create_filegroup(host, parsed.module, parsed.scope, str(parsed.version), path)
        )
        index.add(parsed)

    for key, entry in index.items():
        logger.debug("latest %s -> %s", key, entry.path)
        report.declarations.append(create_filegroup(host, entry.module, entry.scope, LATEST, entry.path))


def prebuilt_sdk_stubs(
    host: BuildHost,
    module: PrebuiltApisModule,
    files: Iterable[str],
    report: GenerationReport,
) -> None:
    """Create a java_import per stub jar, skipping jars outside a known scope."""
    for path in _relative(files, module.prefix()):
        parsed = parse_jar_path(path)
        if isinstance(parsed, Skipped):
            logger.debug("skipping %s: %s", path, parsed.reason)
            continue
        report.declarations.append(create_import(host, parsed.module, parsed.scope, parsed.version, path))


def _glob_required(host: BuildHost, module: PrebuiltApisModule, pattern: str, what: str) -> list[str]:
    mydir = module.prefix()
    files = host.glob(mydir + pattern)
    if not files:
        raise NoArtifactsFoundError(f"no {what} found under {mydir or './'!r}")
    return files


def generate(host: BuildHost, module: PrebuiltApisModule) -> GenerationReport:
    """Expand one prebuilt_apis meta-module into build declarations.

    Both kinds of artifact are globbed before anything is registered, so a
    module missing either jars or API files produces no declarations at all.

    Args:
        host: Build host used for globbing and registration.
        module: The meta-module to expand.

    Raises:
        GlobError: If the host cannot scan the module directory.
        NoArtifactsFoundError: If no jar or no API file is found.
        DuplicateNameError: If a generated name is already registered.

    Returns:
        A `GenerationReport` with every declaration created, in creation order,
        and the per-path diagnostics.
    """
    api_files = _glob_required(host, module, API_FILE_PATTERN, "api file")
    jar_files = _glob_required(host, module, JAR_PATTERN, "jar file")

    report = GenerationReport(module=module.name)
    prebuilt_api_files(host, module, api_files, report)
    prebuilt_sdk_stubs(host, module, jar_files, report)

    logger.info(
        "%s: generated %d declaration(s), %d error(s)",
        module.name,
        len(report.declarations),
        len(report.diagnostics),
    )
    return report
