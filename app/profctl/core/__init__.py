"""Core functionality for profctl.

This package contains path derivation, snapshot primitives, registry
store I/O and the swap engine.
"""
