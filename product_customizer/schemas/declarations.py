"""
Declaration schemas.

Contributors hand in loosely shaped mappings. These models fill the
defaults and coerce the shorthand forms (a single string where a list is
allowed, "yes"/"no" where a bool is expected) into canonical shapes.
"""

from typing import Any, Iterable
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator


TRUTHY_STRINGS = {"yes", "true", "1", "on"}


def unique(items: Iterable[str]) -> tuple[str, ...]:
    """Deduplicate, keeping first-seen order."""
    return tuple(dict.fromkeys(items))


def string_to_array(value: Any) -> tuple[str, ...]:
    """
    Coerce a scalar-or-list value into an ordered set of strings.

    Strings are split on commas. Empty entries are dropped.
    """
    if value is None:
        return ()
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, (list, tuple, set, frozenset)):
        items = value
    else:
        items = [value]

    return unique(str(item).strip() for item in items if item is not None and str(item).strip())


def string_to_bool(value: Any) -> bool:
    """Coerce "yes"/"no" style values into a bool."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY_STRINGS
    return bool(value)


def bool_to_string(value: bool) -> str:
    """Encode a bool the way the host stores checkbox state."""
    return "yes" if value else "no"


def visibility_class(target: str, action: str = "show") -> str:
    """Visibility class for a product type or option, e.g. show_if_simple."""
    return f"{action}_if_{target}"


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def tab_list(value: Any) -> tuple[dict[str, Any], ...]:
    # A single tab may be given without the surrounding list
    if value is None:
        return ()
    if isinstance(value, dict):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(dict(tab) for tab in value if isinstance(tab, dict))


class TabDeclaration(BaseModel):
    """
    A tab as declared by a contributor.

    Tabs are kept loosely typed on their owner and parsed one by one during
    aggregation, so one broken tab never takes its owner down with it.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str | None = None
    key: str | None = None
    label: str | None = None
    icon: str = ""
    priority: int | None = Field(default=None, validation_alias=AliasChoices("priority", "prio"))
    for_: tuple[str, ...] = Field(default=(), validation_alias=AliasChoices("for", "for_"))
    panel: tuple[str, ...] = Field(default=(), validation_alias=AliasChoices("panel", "panels"))

    @field_validator("id", "key", "label", mode="before")
    @classmethod
    def coerce_optional_str(cls, v: Any) -> str | None:
        return _optional_str(v)

    @field_validator("icon", mode="before")
    @classmethod
    def coerce_icon(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("for_", "panel", mode="before")
    @classmethod
    def coerce_list(cls, v: Any) -> tuple[str, ...]:
        return string_to_array(v)

    @field_validator("priority", mode="before")
    @classmethod
    def coerce_priority(cls, v: Any) -> int | None:
        # Unparsable priorities fall back to the default
        if v is None or isinstance(v, bool):
            return None
        try:
            return int(v)
        except (TypeError, ValueError):
            return None

    @property
    def resolved_key(self) -> str | None:
        """Registry key: the explicit alias, else the id."""
        return self.key or self.id


class TypeDeclaration(BaseModel):
    """A custom product type."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    slug: str = Field(min_length=1)
    name: str | None = None
    implementation: Any = Field(
        default=None,
        validation_alias=AliasChoices("implementation", "implementation_ref", "class"),
    )
    extends: tuple[str, ...] = ()
    show_groups: tuple[str, ...] = ()
    show_tabs: tuple[str, ...] = ()
    tabs: tuple[dict[str, Any], ...] = ()

    # Filled by the extends resolver
    visibility_classes: tuple[str, ...] = ()

    @field_validator("extends", "show_groups", "show_tabs", mode="before")
    @classmethod
    def coerce_list(cls, v: Any) -> tuple[str, ...]:
        return string_to_array(v)

    @field_validator("tabs", mode="before")
    @classmethod
    def coerce_tabs(cls, v: Any) -> tuple[dict[str, Any], ...]:
        return tab_list(v)

    @model_validator(mode="before")
    @classmethod
    def normalize_input(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        # visibility_classes is derived from extends, never declared
        data = {k: v for k, v in data.items() if k != "visibility_classes"}
        if not data.get("name"):
            data["name"] = data.get("slug")
        return data

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, v: Any) -> str | None:
        return _optional_str(v)


class OptionDeclaration(BaseModel):
    """
    A per-product boolean option, rendered as a checkbox.

    `for_` only ever holds visibility classes (show_if_<target>).
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    key: str = Field(min_length=1)
    label: str | None = None
    description: str | None = Field(
        default=None,
        validation_alias=AliasChoices("description", "desc"),
    )
    for_: tuple[str, ...] = Field(default=(), validation_alias=AliasChoices("for", "for_"))
    default: bool = False
    is_native_property: bool = Field(
        default=False,
        validation_alias=AliasChoices("is_native_property", "prop"),
    )
    extends: tuple[str, ...] = ()
    show_groups: tuple[str, ...] = ()
    show_tabs: tuple[str, ...] = ()
    tabs: tuple[dict[str, Any], ...] = ()

    @field_validator("label", "description", mode="before")
    @classmethod
    def coerce_optional_str(cls, v: Any) -> str | None:
        return _optional_str(v)

    @field_validator("for_", mode="before")
    @classmethod
    def coerce_for(cls, v: Any) -> tuple[str, ...]:
        return unique(visibility_class(target) for target in string_to_array(v))

    @field_validator("default", "is_native_property", mode="before")
    @classmethod
    def coerce_bool(cls, v: Any) -> bool:
        return string_to_bool(v)

    @field_validator("extends", "show_groups", "show_tabs", mode="before")
    @classmethod
    def coerce_list(cls, v: Any) -> tuple[str, ...]:
        return string_to_array(v)

    @field_validator("tabs", mode="before")
    @classmethod
    def coerce_tabs(cls, v: Any) -> tuple[dict[str, Any], ...]:
        return tab_list(v)
