"""Package for utilities.

This package is meant to contain generalized, stand alone modules that can
be used throughout the rest of the project, namely the stream accessors and
the execution timer.
"""
__all__ = ['streams', 'timing']
