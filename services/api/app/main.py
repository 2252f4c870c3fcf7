# Unit Converter API Main Entry Point
import logging
import sys
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from .settings import Settings, settings
from .routers.ready import router as ready_router
from .routers.units import router as units_router

# Configure structured logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger("unitconv")

# Rate limiter (per-IP)
def build_limiter(s: Settings) -> Limiter:
    return Limiter(
        key_func=get_remote_address,
        default_limits=[s.rate_limit_default],
        enabled=s.rate_limit_enabled,
    )


limiter = build_limiter(settings)

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    docs_url="/docs" if settings.docs_enabled else None,
    redoc_url=None,
    openapi_url="/openapi.json" if settings.docs_enabled else None,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(ready_router, tags=["ready"])
app.include_router(units_router, prefix="/convert", tags=["convert"])

logger.info(f"{settings.app_name} ready (CORS origins: {', '.join(settings.cors_origins)})")
