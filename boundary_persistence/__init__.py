# boundary_persistence/__init__.py
from __future__ import annotations

"""
boundary_persistence: persistent homology by Z2 reduction of boundary matrices.

Recommended usage:
    import boundary_persistence as bp

Public API:
    - Curated user-facing symbols are re-exported from :mod:`boundary_persistence.api`.
    - Subpackages are available as namespaces (``bp.matrix``, ``bp.reduction``,
      ``bp.diagrams``, ``bp.topology``, ``bp.io``) and are imported lazily.
"""

import importlib
from typing import Any

# ------------------------------------------------------------
# Version
# ------------------------------------------------------------
from ._version import __version__

# ------------------------------------------------------------
# Curated public API re-export
# ------------------------------------------------------------
from .api import *  # noqa: F401,F403
from .api import __all__ as _api_all

# ------------------------------------------------------------
# Subpackages exposed as bp.matrix / bp.reduction / ...
# ------------------------------------------------------------
_SUBPACKAGES = ("matrix", "reduction", "diagrams", "topology", "io")

__all__ = ["__version__", *_api_all, *_SUBPACKAGES]


def __getattr__(name: str) -> Any:
    if name in _SUBPACKAGES:
        return importlib.import_module(f"{__name__}.{name}")
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    names = set(globals().keys())
    names.update(_SUBPACKAGES)
    return sorted(names)
