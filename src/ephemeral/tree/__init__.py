"""In-memory description of a project layout.

This module provides the node classes used to describe the directories and files of
a project before it is written to disk.
"""
