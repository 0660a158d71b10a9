# Hearth API Main Entry Point
import logging
import sys
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from .errors import HearthError
from .settings import settings
from .routers.ready import router as ready_router
from .routers.recipes import router as recipes_router

# Configure structured logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger("hearth")

# App-wide rate limiter (per-IP backstop); endpoint guards live in deps.py
limiter = Limiter(key_func=get_remote_address, default_limits=[settings.default_rate_limit])

app = FastAPI(title="Hearth API", version="0.1.0")
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


@app.exception_handler(HearthError)
async def hearth_error_handler(request: Request, exc: HearthError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message, "code": exc.code},
    )


app.include_router(ready_router, prefix="/api", tags=["ready"])
app.include_router(recipes_router, prefix="/api", tags=["recipes"])
