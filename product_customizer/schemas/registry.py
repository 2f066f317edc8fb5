"""
Resolved registry schemas.
"""

from enum import Enum
from pydantic import BaseModel, ConfigDict


class ResolvedTab(BaseModel):
    """A tab after key resolution, ready for rendering."""

    model_config = ConfigDict(frozen=True)

    key: str
    id: str
    label: str | None = None
    icon: str = ""
    priority: int
    panels: tuple[str, ...]
    visibility_classes: tuple[str, ...]
    target: str
    owner: str


class OptionFieldSpec(BaseModel):
    """Checkbox field of a product option, in the host's field format."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str | None = None
    description: str | None = None
    default: str
    wrapper_class: str


class WiringAction(str, Enum):
    SHOW = "show"
    HIDE = "hide"


class WiringRule(BaseModel):
    """
    One client-side visibility rule.

    Elements matching `selector` receive `class_name`, so they follow the
    checkbox or type `key` on top of their own visibility.
    """

    model_config = ConfigDict(frozen=True)

    action: WiringAction
    selector: str
    key: str

    @property
    def class_name(self) -> str:
        return f"{self.action.value}_if_{self.key}"

    def to_dict(self) -> dict[str, str]:
        return {
            "action": self.action.value,
            "selector": self.selector,
            "key": self.key,
            "class": self.class_name,
        }
