from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.trustedhost import TrustedHostMiddleware

from houseledger.core.config import settings
from houseledger.core.database import init_db
from houseledger.core.logging_config import setup_logging
from houseledger.core.middleware import RequestContextMiddleware, SecurityHeadersMiddleware
from houseledger.web.errors import register_exception_handlers
from houseledger.web.routes import api, health

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize app on startup."""
    await init_db()
    yield


app = FastAPI(
    title=settings.APP_NAME,
    description="Household finance ledger",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    TrustedHostMiddleware,
    allowed_hosts=settings.ALLOWED_HOSTS,
)
app.add_middleware(RequestContextMiddleware)
app.add_middleware(SecurityHeadersMiddleware)

register_exception_handlers(app)

app.include_router(api.router, prefix=settings.API_PREFIX)
app.include_router(health.router, tags=["health"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
