"""Core pipeline for git-stales."""

from .stales import StaleBranchFinder

__all__ = ["StaleBranchFinder"]
