"""
git-stales - Find and delete branches that are merged and old
"""

from .__version__ import __version__
from .core import StaleBranchFinder
from .cli.main import main

__all__ = ["StaleBranchFinder", "main", "__version__"]
