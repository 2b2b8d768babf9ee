# API routes
from fastapi import APIRouter, HTTPException
from app.api.auth import router as auth_router
from app.api.clients import router as clients_router
from app.api.programs import router as programs_router
from app.api.tickets import router as tickets_router
from app.api.recipes import router as recipes_router

# Combine all routers
router = APIRouter()
router.include_router(auth_router)
router.include_router(clients_router)
router.include_router(programs_router)
router.include_router(tickets_router)
router.include_router(recipes_router)


# Must stay last: anything under /api that no route above handled
@router.api_route(
    "/{unmatched_path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"],
    include_in_schema=False,
)
async def unknown_endpoint(unmatched_path: str):
    raise HTTPException(status_code=404, detail="unknown endpoint")


__all__ = ["router"]
