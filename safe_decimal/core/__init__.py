"""
Core numeric kernel, configuration models, and invariants.

This module contains the float-pair representation and everything that keeps
it exact and bounded. It has no I/O and no mutable state.
"""
