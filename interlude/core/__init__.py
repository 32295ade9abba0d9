"""
Core sequence algebra, functional combinators, and their configuration models.

This module contains the pure building blocks of the library; nothing here
performs I/O or keeps state between calls.
"""
