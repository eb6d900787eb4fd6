from fastapi import APIRouter

from app.api.routes import documents


router = APIRouter()

router.include_router(documents.router)
