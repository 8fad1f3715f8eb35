"""Filesystem access for materializing and tearing down project layouts."""
