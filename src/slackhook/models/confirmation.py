"""
Confirmation dialog shown before an action's effect is applied.
"""

from slackhook.models.base import Entity


class ConfirmationDialog(Entity):
    title: str = ""
    text: str = ""
    ok_text: str = ""
    dismiss_text: str = ""

    def set_title(self, title: str) -> "ConfirmationDialog":
        return self._assign("title", title)

    def set_text(self, text: str) -> "ConfirmationDialog":
        return self._assign("text", text)

    def set_ok_text(self, ok_text: str) -> "ConfirmationDialog":
        return self._assign("ok_text", ok_text)

    def set_dismiss_text(self, dismiss_text: str) -> "ConfirmationDialog":
        return self._assign("dismiss_text", dismiss_text)
