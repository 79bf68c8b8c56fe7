import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from api.dependencies import limiter
from api.router import router
from config import settings
from services.errors import JobHuntError, ProviderError

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
)

app = FastAPI(
    title="JobHunt API",
    description="Resume parsing, AI-assisted job search and application tracking",
    version="1.0.0",
    debug=settings.debug,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(JobHuntError)
async def jobhunt_error_handler(request: Request, exc: JobHuntError) -> JSONResponse:
    headers = {}
    if isinstance(exc, ProviderError) and exc.retry_after:
        headers["Retry-After"] = exc.retry_after
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.kind, "message": exc.message},
        headers=headers,
    )


app.include_router(router)
