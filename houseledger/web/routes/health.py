import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from houseledger.core.config import settings
from houseledger.core.database import get_db
from houseledger.core.schemas import ApiModel

router = APIRouter()
logger = logging.getLogger(__name__)


class HealthStatus(ApiModel):
    status: str
    database: str


class ApiInfo(ApiModel):
    name: str
    version: str
    environment: str
    api_prefix: str


@router.get("/health", summary="Health check", response_model=HealthStatus)
async def health(db: AsyncSession = Depends(get_db)) -> HealthStatus:
    """Simple health check that also touches the database."""
    try:
        await db.execute(text("SELECT 1"))
        db_status = "ok"
    except SQLAlchemyError as exc:
        db_status = "error"
        logger.exception("Database healthcheck failed", exc_info=exc)

    return HealthStatus(status="ok", database=db_status)


@router.get("/", summary="API information", response_model=ApiInfo)
async def info() -> ApiInfo:
    return ApiInfo(
        name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENV,
        api_prefix=settings.API_PREFIX,
    )
