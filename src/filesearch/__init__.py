from __future__ import annotations

"""
FileSearch: incremental, cancellable file name search over directory trees.
"""

from filesearch.domain.constants import APP_VERSION as __version__

__all__ = ["__version__"]
