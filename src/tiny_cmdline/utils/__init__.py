"""Shared utilities.

Currently only :mod:`tiny_cmdline.utils.constants`: reserved option
names, usage markers and numeric limits.  Nothing here performs I/O or
imports from other layers.
"""
