"""
Tagged records with defaults, and single-inheritance classes with dynamic method dispatch.

Import what you need from the submodules: records, classes, dispatch.
"""
