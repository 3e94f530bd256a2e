"""
Version information for the fe2o3 package.
"""

# Version follows semantic versioning: MAJOR.MINOR.PATCH
__version__ = "0.1.0"

# Version components for programmatic access
VERSION_INFO = tuple(int(x) for x in __version__.split('.'))

# Development status
DEV_STATUS = "alpha"  # alpha, beta, rc, stable


def get_version_info():
    """Version string, components and development status as a dict."""
    return {
        "version": __version__,
        "version_info": VERSION_INFO,
        "dev_status": DEV_STATUS,
    }


def is_stable_release():
    """Check if this is a stable release."""
    return DEV_STATUS == "stable" and "dev" not in __version__
