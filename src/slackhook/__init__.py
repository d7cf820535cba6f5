"""
slackhook: Slack incoming-webhook client for Python.

Build messages with attachments, fields and interactive actions,
then post them to a webhook endpoint.
"""

from slackhook.client import Client, ClientSettings
from slackhook.message import IconType, Message
from slackhook.models.action import Action
from slackhook.models.attachment import Attachment
from slackhook.models.confirmation import ConfirmationDialog
from slackhook.models.field import AttachmentField
from slackhook.errors import SlackHookError, InvalidInputError, SerializationError, SubmissionError

__version__ = "0.1.0"
__all__ = [
    "Client",
    "ClientSettings",
    "Message",
    "IconType",
    "Attachment",
    "AttachmentField",
    "Action",
    "ConfirmationDialog",
    "SlackHookError",
    "InvalidInputError",
    "SerializationError",
    "SubmissionError",
]
