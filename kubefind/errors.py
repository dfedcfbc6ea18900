"""Exception hierarchy for kubefind."""

from typing import Optional


class KubeFindError(Exception):
    """Base class for all kubefind errors."""


class ConfigurationError(KubeFindError):
    """A required setting is missing or invalid."""


class PatternError(KubeFindError):
    """A search or exclude pattern failed to compile."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"error in re.compile {pattern}: {reason}")


class ClusterConnectionError(KubeFindError, RuntimeError):
    """The cluster client could not be built."""


class KubectlError(KubeFindError):
    """A kubectl invocation failed."""

    def __init__(self, message: str, stderr: Optional[str] = None):
        self.stderr = stderr
        if stderr:
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)


class CollectionError(KubeFindError):
    """Listing a resource kind failed."""

    def __init__(self, kind: str, cause: Optional[BaseException] = None):
        self.kind = kind
        message = f"error in {kind}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
