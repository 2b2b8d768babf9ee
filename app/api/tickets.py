"""
Support ticket endpoints

- Admin side: list, read, reply, close/reopen, delete
- Client side: create a ticket, reply, look up the latest ticket by email + password
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException

from app.database.schemas import MessageCreate, SuccessResponse, Ticket, TicketCreate, TicketUpdate
from app.database import storage as database
from app.services.tickets import apply_status, build_message, create_ticket, find_latest_ticket
from app.services.utils import new_id
from app.api.utils import get_or_404

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/tickets", response_model=List[Ticket])
async def list_tickets():
    return database.load_db().tickets


@router.post("/support/create", response_model=Ticket, status_code=201)
async def create_support_ticket(payload: TicketCreate):
    """
    Open a new support ticket

    A first client message is added when text or an attachment (file + fileName)
    is provided. Returns the full ticket.
    """
    ticket = create_ticket(
        new_id(),
        payload.email,
        payload.password,
        message=payload.message,
        file=payload.file,
        file_name=payload.file_name,
    )
    with database.transaction() as db:
        db.tickets.append(ticket)
    logger.info(f"Created ticket {ticket.id}")
    return ticket


@router.get("/tickets/{ticket_id}", response_model=Ticket)
async def get_ticket(ticket_id: str):
    return get_or_404(database.load_db().tickets, ticket_id)


# Extra path segments after the id are ignored: /tickets/{id}/anything reads the ticket
@router.get("/tickets/{ticket_id}/{suffix:path}", response_model=Ticket, include_in_schema=False)
async def get_ticket_with_suffix(ticket_id: str, suffix: str):
    return get_or_404(database.load_db().tickets, ticket_id)


@router.post("/tickets/{ticket_id}/message", response_model=SuccessResponse)
async def add_message(ticket_id: str, payload: MessageCreate):
    """
    Append a message to a ticket thread

    Either text or file is required. The attachment is stored only when
    fileName is given too; a failed attachment write still saves the message.
    """
    with database.transaction() as db:
        ticket = get_or_404(db.tickets, ticket_id)
        ticket.messages.append(build_message(
            payload.sender or "client",
            payload.text,
            payload.file,
            payload.file_name,
        ))
    return SuccessResponse(success=True)


@router.put("/tickets/{ticket_id}", response_model=SuccessResponse)
async def update_ticket(ticket_id: str, payload: Optional[TicketUpdate] = None):
    """
    Change ticket status (close or reopen)

    Closing an open ticket and reopening a closed one each add an admin message.
    """
    with database.transaction() as db:
        ticket = get_or_404(db.tickets, ticket_id)
        if payload and payload.status:
            apply_status(ticket, payload.status)
    return SuccessResponse(success=True)


@router.delete("/tickets/{ticket_id}", response_model=SuccessResponse)
async def delete_ticket(ticket_id: str):
    with database.transaction() as db:
        ticket = get_or_404(db.tickets, ticket_id)
        db.tickets.remove(ticket)
    logger.info(f"Deleted ticket {ticket_id}")
    return SuccessResponse(success=True)


@router.get("/user/ticket", response_model=Ticket)
async def get_user_ticket(email: Optional[str] = None, password: Optional[str] = None):
    """
    Latest ticket for a client, matched by email + password

    Lets clients check their ticket status without an account.
    """
    if not email or not password:
        raise HTTPException(status_code=400, detail="email and password required")
    ticket = find_latest_ticket(database.load_db().tickets, email, password)
    if ticket is None:
        raise HTTPException(status_code=404, detail="no tickets found")
    return ticket
