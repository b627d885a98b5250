"""Pydantic models for prebuilt API artifacts and generated declarations."""

from __future__ import annotations

import posixpath
from typing import Literal, Union

from pydantic import BaseModel, Field


PUBLIC = "public"
SYSTEM = "system"
TEST = "test"
CORE = "core"

JAR_SCOPES = frozenset({PUBLIC, SYSTEM, TEST, CORE})
API_FILE_SCOPES = frozenset({PUBLIC, SYSTEM, TEST})

# Pending migration: should become the scope of the jar.
SDK_VERSION_PLACEHOLDER = "current"
LATEST = "latest"


class JarIdentity(BaseModel):
    """A stub jar found at `<version>/<scope>/<module>.jar`."""

    module: str = Field(..., min_length=1)
    version: str
    scope: str
    path: str


class ApiFileIdentity(BaseModel):
    """An API signature file found at `<version>/<scope>/api/<module>.txt`."""

    module: str = Field(..., min_length=1)
    version: int = Field(..., ge=0)
    scope: str
    path: str

    @property
    def key(self) -> str:
        """Return the `module.scope` key used to pick the latest version."""
        return f"{self.module}.{self.scope}"


class Skipped(BaseModel):
    """A jar path that is silently ignored."""

    path: str
    reason: str


class Invalid(BaseModel):
    """An API file path that must be reported as an error."""

    path: str
    reason: str


class ImportDeclaration(BaseModel):
    """A java_import node wrapping exactly one prebuilt jar."""

    kind: Literal["java_import"] = "java_import"
    name: str = Field(..., min_length=1)
    jars: list[str] = Field(default_factory=list)
    sdk_version: str = SDK_VERSION_PLACEHOLDER
    installable: bool = False


class FileGroupDeclaration(BaseModel):
    """A filegroup node naming its source paths under one logical name."""

    kind: Literal["filegroup"] = "filegroup"
    name: str = Field(..., min_length=1)
    srcs: list[str] = Field(default_factory=list)


Declaration = Union[ImportDeclaration, FileGroupDeclaration]


class Diagnostic(BaseModel):
    """An error reported against a meta-module, optionally tied to one path."""

    module: str
    path: str | None = None
    message: str

    def label(self) -> str:
        """Return a user-facing label for the diagnostic.

        Returns:
            The message prefixed with the module name.
        """
        return f"{self.module}: {self.message}"


class PrebuiltApisModule(BaseModel):
    """One `prebuilt_apis` meta-module instance.

    Attributes:
        name: Name of the meta-module, used to attribute diagnostics.
        dir: Module directory relative to the host root ("." is the root).
    """

    name: str = Field(default="prebuilt_apis", min_length=1)
    dir: str = "."

    def prefix(self) -> str:
        """Return the directory prefix prepended to glob patterns."""
        d = self.dir.strip()
        if not d:
            return ""
        d = posixpath.normpath(d)
        if d == ".":
            return ""
        return d + "/"


class GenerationReport(BaseModel):
    """Outcome of one generation pass over a meta-module."""

    module: str
    declarations: list[Declaration] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    def names(self) -> list[str]:
        return [d.name for d in self.declarations]

    def latest(self) -> dict[str, str]:
        """Map every `latest` filegroup name to the path it points at."""
        suffix = "." + LATEST
        return {
            d.name: d.srcs[0]
            for d in self.declarations
            if isinstance(d, FileGroupDeclaration) and d.name.endswith(suffix) and d.srcs
        }
