"""Exception types raised by the docs.rs resolution pipeline."""

from typing import Optional, Sequence


class DocsRsError(Exception):
    """Base class for all errors raised by this package."""

    def with_context(self, context: str) -> "DocsRsError":
        """Return a copy of this error with ``context`` prepended to the message."""
        wrapped = self._copy(f"{context}: {self}")
        wrapped.__cause__ = self
        return wrapped

    def _copy(self, message: str) -> "DocsRsError":
        return type(self)(message)


class InvalidArgumentError(DocsRsError, ValueError):
    """A caller-supplied argument cannot be used."""


class VersionResolutionError(DocsRsError):
    """The registry could not tell us which version to use for a crate."""

    def __init__(self, message: str, crate_name: Optional[str] = None):
        super().__init__(message)
        self.crate_name = crate_name

    def _copy(self, message: str) -> "DocsRsError":
        return VersionResolutionError(message, self.crate_name)


class DocumentNotFoundError(DocsRsError):
    """Every candidate URL for a document came back as not found."""

    def __init__(self, message: str, crate_name: Optional[str] = None, version: Optional[str] = None,
                 candidates: Sequence[str] = ()):
        super().__init__(message)
        self.crate_name = crate_name
        self.version = version
        self.candidates = tuple(candidates)

    @classmethod
    def for_candidates(cls, crate_name: str, version: str, candidates: Sequence[str]) -> "DocumentNotFoundError":
        tried = ", ".join(candidates)
        return cls(
            f"No documentation layout matched for {crate_name} {version} (tried: {tried})",
            crate_name, version, candidates,
        )

    def _copy(self, message: str) -> "DocsRsError":
        return DocumentNotFoundError(message, self.crate_name, self.version, self.candidates)


class TransportError(DocsRsError):
    """A network or HTTP failure that is not a soft miss."""

    def __init__(self, message: str, url: Optional[str] = None, status: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status = status

    def _copy(self, message: str) -> "DocsRsError":
        return TransportError(message, self.url, self.status)
