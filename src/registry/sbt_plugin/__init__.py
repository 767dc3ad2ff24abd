"""sbt plugin registry package.

- walker.py: three-level walk over scala_<v>/sbt_<v>/<version> listings
- client.py: search root selection and fallback to the generic artifact layout

Public API is re-exported here; patch points for tests live in the submodules.
"""

from .client import SbtPluginResolver, search_roots  # noqa: F401
from .walker import PluginTreeWalker  # noqa: F401

__all__ = [
    "PluginTreeWalker",
    "SbtPluginResolver",
    "search_roots",
]
