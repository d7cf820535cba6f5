"""
Attachment: a rich-content block nested inside a message.

Fields and actions keep insertion order; that is the order Slack renders them in.
`markdown_fields` (wire key `mrkdwn_in`) names which of this attachment's text
fields are interpreted as Slack markdown.
"""

from collections.abc import Iterable
from typing import Any

from pydantic import Field

from slackhook.models.action import Action
from slackhook.models.base import Entity, name_list
from slackhook.models.field import AttachmentField


class Attachment(Entity):
    fallback: str = ""
    text: str = ""
    pretext: str = ""
    color: str = ""
    title: str = ""
    title_link: str = ""
    author_name: str = ""
    author_link: str = ""
    author_icon: str = ""
    image_url: str = ""
    thumb_url: str = ""
    markdown_fields: list[str] = Field(default_factory=list, alias="mrkdwn_in")
    fields: list[AttachmentField] = Field(default_factory=list)
    actions: list[Action] = Field(default_factory=list)

    def set_fallback(self, fallback: str) -> "Attachment":
        return self._assign("fallback", fallback)

    def set_text(self, text: str) -> "Attachment":
        return self._assign("text", text)

    def set_pretext(self, pretext: str) -> "Attachment":
        return self._assign("pretext", pretext)

    def set_color(self, color: str) -> "Attachment":
        return self._assign("color", color)

    def set_title(self, title: str) -> "Attachment":
        return self._assign("title", title)

    def set_title_link(self, title_link: str) -> "Attachment":
        return self._assign("title_link", title_link)

    def set_author_name(self, author_name: str) -> "Attachment":
        return self._assign("author_name", author_name)

    def set_author_link(self, author_link: str) -> "Attachment":
        return self._assign("author_link", author_link)

    def set_author_icon(self, author_icon: str) -> "Attachment":
        return self._assign("author_icon", author_icon)

    def set_image_url(self, image_url: str) -> "Attachment":
        return self._assign("image_url", image_url)

    def set_thumb_url(self, thumb_url: str) -> "Attachment":
        return self._assign("thumb_url", thumb_url)

    def set_markdown_fields(self, names: Iterable[str]) -> "Attachment":
        return self._assign("markdown_fields", name_list(names))

    # -- fields --

    def add_field(self, field: Any) -> "Attachment":
        """Append an AttachmentField, or one built from a mapping."""
        self.fields.append(AttachmentField.coerce(field))
        return self

    def set_fields(self, fields: Iterable[Any]) -> "Attachment":
        resolved = [AttachmentField.coerce(f) for f in fields]
        self.fields = resolved
        return self

    def clear_fields(self) -> "Attachment":
        self.fields = []
        return self

    # -- actions --

    def add_action(self, action: Any) -> "Attachment":
        """Append an Action, or one built from a mapping."""
        self.actions.append(Action.coerce(action))
        return self

    def set_actions(self, actions: Iterable[Any]) -> "Attachment":
        resolved = [Action.coerce(a) for a in actions]
        self.actions = resolved
        return self

    def clear_actions(self) -> "Attachment":
        self.actions = []
        return self
