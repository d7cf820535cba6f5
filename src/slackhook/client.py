"""
Client: webhook endpoint plus the defaults applied to every new message.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from slackhook.errors import InvalidInputError, SerializationError, SubmissionError
from slackhook.message import Message
from slackhook.transport.http import HttpTransport, Transport

logger = logging.getLogger(__name__)


class ClientSettings(BaseModel):
    """Recognized client attributes. Unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")

    channel: str = ""
    username: str = ""
    icon: Optional[str] = None
    link_names: bool = False
    unfurl_links: bool = False
    unfurl_media: bool = True
    allow_markdown: bool = True
    markdown_in_attachments: list[str] = Field(default_factory=list)


class Client:
    def __init__(
        self,
        endpoint: str,
        attributes: Optional[Mapping[str, Any]] = None,
        transport: Optional[Transport] = None,
    ):
        try:
            settings = ClientSettings.model_validate(
                {k: v for k, v in (attributes or {}).items() if v is not None}
            )
        except ValidationError as e:
            raise InvalidInputError(
                f"Invalid client attributes: {e.error_count()} error(s)",
                details={"errors": e.errors(include_url=False)},
            ) from e

        self.endpoint = endpoint
        self.default_channel = settings.channel
        self.default_username = settings.username
        self.default_icon = settings.icon
        self.link_names = settings.link_names
        self.unfurl_links = settings.unfurl_links
        self.unfurl_media = settings.unfurl_media
        self.allow_markdown = settings.allow_markdown
        self.markdown_in_attachments = settings.markdown_in_attachments

        self.transport: Transport = transport or HttpTransport()

    def create_message(self) -> Message:
        """A new Message carrying the client's current defaults."""
        message = Message(self)
        message.set_channel(self.default_channel)
        message.set_username(self.default_username)
        message.set_icon(self.default_icon)
        message.set_allow_markdown(self.allow_markdown)
        message.set_markdown_in_attachments(self.markdown_in_attachments)
        return message

    def compose(self) -> Message:
        """Start a message for fluent use: ``client.compose().to("#ops").send("hi")``."""
        return self.create_message()

    def prepare_payload(self, message: Message) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "text": message.text,
            "channel": message.channel,
            "username": message.username,
            "link_names": 1 if self.link_names else 0,
            "unfurl_links": self.unfurl_links,
            "unfurl_media": self.unfurl_media,
            "mrkdwn": message.allow_markdown,
        }
        if message.icon:
            payload[message.icon_type] = message.icon
        payload["attachments"] = [a.to_dict() for a in message.attachments]
        return payload

    def send_message(self, message: Message) -> None:
        payload = self.prepare_payload(message)

        try:
            body = json.dumps(payload, ensure_ascii=False, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Payload is not JSON-encodable: {e}") from e

        logger.debug(f"Posting {len(body)} bytes to webhook for channel {message.channel!r}")
        try:
            self.transport.post(self.endpoint, body)
        except SubmissionError as e:
            logger.error(f"Webhook submission failed: {e}")
            raise
        except Exception as e:
            logger.error(f"Webhook transport error: {e}")
            raise SubmissionError(f"Webhook transport error: {e}", details={"cause": repr(e)}) from e
        logger.info("Webhook message delivered")

    def close(self) -> None:
        self.transport.close()
