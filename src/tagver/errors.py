"""Error kinds raised while resolving a version. All of them are fatal."""


class TagverError(Exception):
    """Base class for every failure the CLI reports and exits on."""


class MissingDependencyError(TagverError):
    """A required external tool is not on PATH."""


class NotARepositoryError(TagverError):
    """The current directory is not inside a git checkout."""


class MissingVersionFileError(TagverError):
    """The candidate version file is missing or unreadable."""


class NoMatchingTagError(TagverError):
    """No tag matching the release pattern is reachable from HEAD."""


class StaleCandidateError(TagverError):
    """The candidate version was not bumped past the last tagged release."""


class InvalidVersionError(TagverError):
    """A candidate or tag version has a shape we refuse to guess at."""
