"""
Product customizer.

Registers custom product types, options and tabs declared by contributors
and resolves them into the admin artifacts of the catalog editor.
"""

__version__ = "0.1.0"
