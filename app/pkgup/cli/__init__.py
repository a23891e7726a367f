"""Command-line interface for pkgup."""
