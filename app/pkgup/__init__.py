"""pkgup - one update workflow for pacman, apt, apk and dnf."""

__version__ = "0.1.0"
