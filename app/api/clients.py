"""
Client management endpoints
"""
import logging
from datetime import date
from typing import List

from fastapi import APIRouter

from app.database.schemas import Client, ClientCreate, CreatedResponse
from app.database import storage as database
from app.services.clients import refresh_clients
from app.services.utils import new_id, utc_now

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/clients", response_model=List[Client])
async def list_clients():
    """
    Get all clients with days left recomputed

    Memberships that ran out are deactivated and the change is persisted.
    """
    with database.locked():
        db = database.load_db()
        if refresh_clients(db.clients, utc_now()):
            logger.info("Deactivated expired client memberships")
            database.save_db(db)
    return db.clients


@router.post("/clients", response_model=CreatedResponse, status_code=201)
async def create_client(client: ClientCreate):
    """
    Add a client

    startDate defaults to today, active defaults to true unless explicitly false
    """
    client_id = new_id()
    with database.transaction() as db:
        db.clients.append(Client(
            id=client_id,
            name=client.name,
            email=client.email,
            start_date=client.start_date or date.today(),
            active=client.active is not False,
            duration=client.duration or None,
        ))
    return CreatedResponse(id=client_id)
