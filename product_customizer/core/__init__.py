"""
Core infrastructure: configuration, hooks, plugins and interfaces.
"""
