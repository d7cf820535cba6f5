"""
Message: the top-level webhook payload builder.

Messages are normally made by `Client.create_message()`, which fills in the
client's defaults. Every mutator returns the message so calls can be chained:

    client.create_message().to("#ops").set_text("deploy finished").send()
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Optional

from slackhook.errors import InvalidInputError
from slackhook.models.attachment import Attachment
from slackhook.models.base import name_list

if TYPE_CHECKING:
    from slackhook.client import Client


class IconType:
    """Icon classification; the value is the payload key the icon is sent under."""

    URL = "icon_url"
    EMOJI = "icon_emoji"


def classify_icon(icon: str) -> str:
    if len(icon) >= 2 and icon.startswith(":") and icon.endswith(":"):
        return IconType.EMOJI
    return IconType.URL


class Message:
    def __init__(self, client: Client):
        self._client = client  # not owned; used by send()
        self.text = ""
        self.channel = ""
        self.username = ""
        self._icon: Optional[str] = None
        self._icon_type: Optional[str] = None
        self.allow_markdown = True
        self.markdown_in_attachments: list[str] = []
        self.attachments: list[Attachment] = []

    def __repr__(self) -> str:
        return f"Message(channel={self.channel!r}, text={self.text!r}, attachments={len(self.attachments)})"

    @property
    def client(self) -> Client:
        return self._client

    def set_text(self, text: str) -> Message:
        self.text = text
        return self

    def set_channel(self, channel: str) -> Message:
        self.channel = channel
        return self

    def set_username(self, username: str) -> Message:
        self.username = username
        return self

    # -- icon --

    @property
    def icon(self) -> Optional[str]:
        return self._icon

    @property
    def icon_type(self) -> Optional[str]:
        """IconType.URL or IconType.EMOJI, or None when no icon is set."""
        return self._icon_type

    def set_icon(self, icon: Optional[str]) -> Message:
        """Set the icon, classifying it as emoji (``:name:``) or URL. None clears it."""
        if icon is None:
            self._icon = self._icon_type = None
            return self
        self._icon_type = classify_icon(icon)
        self._icon = icon
        return self

    # -- markdown --

    def set_allow_markdown(self, value: bool) -> Message:
        self.allow_markdown = value
        return self

    def enable_markdown(self) -> Message:
        return self.set_allow_markdown(True)

    def disable_markdown(self) -> Message:
        return self.set_allow_markdown(False)

    def set_markdown_in_attachments(self, fields: Iterable[str]) -> Message:
        """Markdown-field set inherited by attachments attached from raw data."""
        self.markdown_in_attachments = name_list(fields)
        return self

    # -- chainable aliases --

    def to(self, channel: str) -> Message:
        return self.set_channel(channel)

    def from_(self, username: str) -> Message:
        return self.set_username(username)

    def with_icon(self, icon: Optional[str]) -> Message:
        return self.set_icon(icon)

    # -- attachments --

    def _resolve_attachment(self, attachment: Any) -> Attachment:
        if isinstance(attachment, Attachment):
            return attachment
        if isinstance(attachment, Mapping):
            built = Attachment.from_dict(attachment)
            # None counts as absent, under either the wire or the Python name
            if attachment.get("mrkdwn_in") is None and attachment.get("markdown_fields") is None:
                built.set_markdown_fields(self.markdown_in_attachments)
            return built
        raise InvalidInputError(
            f"Attachment must be an instance of Attachment or a mapping, got {type(attachment).__name__}"
        )

    def attach(self, attachment: Any) -> Message:
        """Append an Attachment, or one built from a mapping."""
        self.attachments.append(self._resolve_attachment(attachment))
        return self

    def set_attachments(self, attachments: Iterable[Any]) -> Message:
        resolved = [self._resolve_attachment(a) for a in attachments]
        self.attachments = resolved
        return self

    def clear_attachments(self) -> Message:
        self.attachments = []
        return self

    # -- output --

    def to_dict(self) -> dict[str, Any]:
        return self._client.prepare_payload(self)

    def send(self, text: Optional[str] = None) -> Message:
        if text:
            self.set_text(text)
        self._client.send_message(self)
        return self
