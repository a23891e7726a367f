"""Core pkgup functionality: detection, configuration, workflows."""
