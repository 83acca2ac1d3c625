"""Version information."""

PACKAGE_VERSION = "0.3.0"


def get_version() -> str:
    """Return the package version string, e.g. '0.3.0'."""
    return PACKAGE_VERSION
