"""Exception hierarchy for semgov."""


class SemgovError(Exception):
    """Base class for errors the CLI reports and exits on."""


class ManifestError(SemgovError):
    """Raised when a plugin manifest cannot be used."""


class ManifestNotFoundError(ManifestError):
    """Raised when a plugin manifest file does not exist."""


class ManifestMalformedError(ManifestError):
    """Raised when a plugin manifest is not a valid manifest record."""


class OracleError(SemgovError):
    """Raised when the classification oracle cannot be invoked."""


class ClassificationError(SemgovError):
    """Raised when a graded classification cannot produce a verdict."""
