"""
HTTP surface of the customizer.
"""
