"""Custom exceptions for prebuilt-apis."""


class PrebuiltApisError(Exception):
    """Base exception for prebuilt-apis."""


class GlobError(PrebuiltApisError):
    """Raised when the host cannot glob the module directory."""


class NoArtifactsFoundError(PrebuiltApisError):
    """Raised when a glob pattern matches no jar or API file."""


class DuplicateNameError(PrebuiltApisError):
    """Raised when a declaration name is already registered in the build graph."""
