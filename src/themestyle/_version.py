"""Installed themestyle version."""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    try:
        return version("themestyle")
    except PackageNotFoundError:
        # running from a source checkout that was never installed
        return "0.0.0"


__version__ = get_version()
