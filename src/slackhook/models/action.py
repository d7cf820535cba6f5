"""
Interactive attachment action (a button).
"""

from typing import Any, ClassVar

from pydantic import Field

from slackhook.models.base import Entity
from slackhook.models.confirmation import ConfirmationDialog


class Action(Entity):
    TYPE_BUTTON: ClassVar[str] = "button"

    STYLE_DEFAULT: ClassVar[str] = "default"
    STYLE_PRIMARY: ClassVar[str] = "primary"
    STYLE_DANGER: ClassVar[str] = "danger"

    name: str = ""
    text: str = ""
    style: str = ""  # not validated against STYLE_*
    type: str = TYPE_BUTTON
    value: str = ""
    confirm: ConfirmationDialog = Field(default_factory=ConfirmationDialog)

    def set_name(self, name: str) -> "Action":
        return self._assign("name", name)

    def set_text(self, text: str) -> "Action":
        return self._assign("text", text)

    def set_style(self, style: str) -> "Action":
        return self._assign("style", style)

    def set_type(self, type: str) -> "Action":
        return self._assign("type", type)

    def set_value(self, value: str) -> "Action":
        return self._assign("value", value)

    def set_confirm(self, confirm: Any) -> "Action":
        """Adopt a ConfirmationDialog, or build one from a mapping."""
        self.confirm = ConfirmationDialog.coerce(confirm)
        return self
