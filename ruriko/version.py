"""Build version information."""

VERSION = "v0.0.0-dev"
GIT_COMMIT = "unknown"
BUILD_TIME = "unknown"


def info() -> str:
    """Return a one-line description of the version, commit and build time."""
    return f"{VERSION} ({GIT_COMMIT}) built at {BUILD_TIME}"