from fastapi import APIRouter

from app.api.v1.endpoints import attack, encrypt, history, table

api_router = APIRouter()

api_router.include_router(
    attack.router,
    prefix="/attack",
    tags=["Attack"],
)

api_router.include_router(
    encrypt.router,
    prefix="/encrypt",
    tags=["Encryption"],
)

api_router.include_router(
    table.router,
    prefix="/table",
    tags=["Table"],
)

api_router.include_router(
    history.router,
    prefix="/history",
    tags=["History"],
)
