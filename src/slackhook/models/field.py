"""
A title/value pair rendered in an attachment's field table.
"""

from slackhook.models.base import Entity


class AttachmentField(Entity):
    title: str = ""
    value: str = ""
    short: bool = False  # rendered side-by-side with other short fields

    def set_title(self, title: str) -> "AttachmentField":
        return self._assign("title", title)

    def set_value(self, value: str) -> "AttachmentField":
        return self._assign("value", value)

    def set_short(self, short: bool) -> "AttachmentField":
        return self._assign("short", short)
