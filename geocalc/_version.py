"""
Exposes the version of geocalc
"""
from importlib.metadata import PackageNotFoundError, version

# Source of truth for setup.py; keep the 'vX.Y.Z' form
_SOURCE_VERSION = 'v0.1.0'

try:
    __version__ = version("geocalc")
except PackageNotFoundError:
    # Running from a source tree without installed metadata
    __version__ = _SOURCE_VERSION.lstrip('v')

__all__ = ["__version__"]
