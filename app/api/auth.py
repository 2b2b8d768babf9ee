"""
Admin login endpoint
"""
from typing import Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.database.schemas import LoginRequest
from app.database import storage as database

router = APIRouter()


@router.post("/login")
async def login(credentials: Optional[LoginRequest] = None):
    """
    Check the admin credential

    Returns {"success": true} on match, otherwise 401 with {"success": false}.
    No session or token is issued.
    """
    credentials = credentials or LoginRequest()
    admin = database.load_db().admin
    success = credentials.username == admin.username and credentials.password == admin.password
    return JSONResponse(status_code=200 if success else 401, content={"success": success})
