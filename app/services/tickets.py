"""
Support ticket lifecycle

- Messages with optional base64 attachments
- open/closed status transitions with admin system messages
- Lookup of a client's latest ticket by email + password
"""
import base64
import binascii
import logging
import re
import uuid
from pathlib import Path
from typing import List, Optional

from app.core import config
from app.database.schemas import Message, Ticket
from app.services.utils import now_iso, parse_timestamp

logger = logging.getLogger(__name__)

CLOSED_MESSAGE = "Destek talebiniz kapatıldı."
REOPENED_MESSAGE = "Destek talebiniz yeniden açıldı."

_UNSAFE_FILENAME_CHARS = re.compile(r'[^A-Za-z0-9_.-]')


def sanitize_filename(file_name: str) -> str:
    """
    Drop every character outside A-Z a-z 0-9 _ . -
    """
    return _UNSAFE_FILENAME_CHARS.sub('', file_name)


def decode_attachment(payload: str) -> bytes:
    """
    Decode a base64 payload, stripping a data URI prefix (data:...;base64,) if present
    """
    comma_index = payload.find(',')
    if comma_index != -1:
        payload = payload[comma_index + 1:]
    return base64.b64decode(payload)


def save_attachment(file: str, file_name: str) -> Optional[str]:
    """
    Write an uploaded attachment into the uploads directory

    The stored name is a unique token plus the sanitized original name.

    Returns:
        Relative URL (/uploads/<name>) or None if the payload could not be
        decoded or written. Failures are logged, never raised, so the
        surrounding message is still saved.
    """
    safe_name = f"{uuid.uuid4().hex[:12]}_{sanitize_filename(file_name)}"
    upload_path = Path(config.UPLOAD_DIR) / safe_name
    try:
        content = decode_attachment(file)
        upload_path.parent.mkdir(parents=True, exist_ok=True)
        upload_path.write_bytes(content)
    except (binascii.Error, ValueError, OSError):
        logger.exception(f"Failed to save attachment {file_name!r}")
        return None
    logger.info(f"Saved attachment {upload_path} ({len(content)} bytes)")
    return config.UPLOAD_URL_PREFIX + safe_name


def build_message(
    sender: str,
    text: Optional[str] = None,
    file: Optional[str] = None,
    file_name: Optional[str] = None,
) -> Message:
    """
    Create a thread message; the attachment is stored only when both file and file_name are given
    """
    message = Message(sender=sender, time=now_iso())
    if text:
        message.text = text
    if file and file_name:
        message.attachment = save_attachment(file, file_name)
    return message


def create_ticket(
    ticket_id: str,
    email: str,
    password: str,
    message: Optional[str] = None,
    file: Optional[str] = None,
    file_name: Optional[str] = None,
) -> Ticket:
    """
    Create an open ticket, with a first client message when text or an attachment is given
    """
    ticket = Ticket(id=ticket_id, email=email, password=password, created=now_iso(), status="open")
    if message or (file and file_name):
        ticket.messages.append(build_message("client", message, file, file_name))
    return ticket


def apply_status(ticket: Ticket, status: str):
    """
    Set the ticket status

    Crossing open -> closed or closed -> open appends an admin message;
    setting the current status again changes nothing else.
    """
    old_status = ticket.status or "open"
    ticket.status = status
    if status == "closed" and old_status != "closed":
        ticket.messages.append(Message(sender="admin", text=CLOSED_MESSAGE, time=now_iso()))
    elif status == "open" and old_status == "closed":
        ticket.messages.append(Message(sender="admin", text=REOPENED_MESSAGE, time=now_iso()))


def find_latest_ticket(tickets: List[Ticket], email: str, password: str) -> Optional[Ticket]:
    """
    Most recently created ticket matching email and password exactly
    """
    matches = [t for t in tickets if t.email == email and t.password == password]
    if not matches:
        return None
    return max(matches, key=lambda t: parse_timestamp(t.created))
