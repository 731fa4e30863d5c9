"""
Core numerical primitives.

This module contains the calculus engine, which is independent of any
rendering surface.
"""
