"""
Clone a repository into an ``<container>/<owner>/`` directory layout.
"""
from .version import __version__

__all__ = ["__version__"]
