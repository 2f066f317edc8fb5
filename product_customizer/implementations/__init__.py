"""
Backend implementations.
"""
