"""Core array_console functionality.

This package is meant to contain the console operations themselves: typed
bulk reads, raw byte reads, writers, cropping and random generation, along
with the argument validation they share.
"""
__all__ = ['arrays', 'input_validation', 'numeric_parsing', 'readers', 'writers']
