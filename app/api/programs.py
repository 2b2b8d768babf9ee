"""
Training program endpoints
"""
from typing import List

from fastapi import APIRouter

from app.database.schemas import CreatedResponse, Program, ProgramCreate
from app.database import storage as database
from app.services.utils import new_id

router = APIRouter()


@router.get("/programs", response_model=List[Program])
async def list_programs():
    return database.load_db().programs


@router.post("/programs", response_model=CreatedResponse, status_code=201)
async def create_program(program: ProgramCreate):
    """
    Add a training program (title required)
    """
    program_id = new_id()
    with database.transaction() as db:
        db.programs.append(Program(
            id=program_id,
            title=program.title,
            description=program.description or "",
            image=program.image or None,
        ))
    return CreatedResponse(id=program_id)
