"""
Pydantic schemas for declarations, the resolved registry and its rendering.
"""

from .declarations import (
    TabDeclaration,
    TypeDeclaration,
    OptionDeclaration,
    bool_to_string,
    string_to_array,
    string_to_bool,
    visibility_class,
)
from .registry import ResolvedTab, OptionFieldSpec, WiringAction, WiringRule
from .presentation import ScreenContext, TabDescriptor, PanelDescriptor, VisibilityScript

__all__ = [
    "TabDeclaration",
    "TypeDeclaration",
    "OptionDeclaration",
    "bool_to_string",
    "string_to_array",
    "string_to_bool",
    "visibility_class",
    "ResolvedTab",
    "OptionFieldSpec",
    "WiringAction",
    "WiringRule",
    "ScreenContext",
    "TabDescriptor",
    "PanelDescriptor",
    "VisibilityScript",
]
