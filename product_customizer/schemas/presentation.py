"""
Presentation schemas.
"""

from typing import Any
from pydantic import BaseModel, ConfigDict


class ScreenContext(BaseModel):
    """The admin screen a render request comes from."""

    page: str = ""
    post_type: str | None = None


class TabDescriptor(BaseModel):
    """Tab entry for the host's product data tabs."""

    model_config = ConfigDict(frozen=True)

    key: str
    id: str
    target: str
    classes: list[str]
    label: str | None = None
    icon: str = ""
    priority: int


class PanelDescriptor(BaseModel):
    """Panel container of a tab. Starts hidden."""

    model_config = ConfigDict(frozen=True)

    key: str
    id: str
    classes: list[str]
    style: str = "display: none;"
    content: str = ""


class VisibilityScript(BaseModel):
    """Visibility wiring consumed by the client-side script."""

    model_config = ConfigDict(frozen=True)

    rules: list[dict[str, Any]]
    options: list[str]
