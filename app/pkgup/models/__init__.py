"""Data models for pkgup.

This module exports the environment and run-mode types.
"""

from pkgup.models.environment import Environment, PackageManagerKind, PrivilegeEscalator, RunMode

__all__ = ["Environment", "PackageManagerKind", "PrivilegeEscalator", "RunMode"]
