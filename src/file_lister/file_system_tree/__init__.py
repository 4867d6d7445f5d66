"""File system tree representation with glob-based exclusion.

This module provides classes for building and rendering tree representations of
directory structures, and for deciding which of their files hold plain text.
"""
