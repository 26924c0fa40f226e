from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import Dict, Optional
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.types import ASGIApp
import uuid

from adblend import config
from adblend.api.ad_blend.routes import router as ad_blend_router
from adblend.logger import json_logger as logger
from adblend.logging_setup import setup_logging

# Ensure logging is configured when the app module is imported (e.g., under uvicorn)
setup_logging()

app = FastAPI(
    title="AdBlend AI",
    description="Blends a model photo and a product photo into one advertisement image with Gemini.",
    version="0.1.0",
)


# Custom middleware to add request context to logger
class ProcessRequestMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        logger.info(f"request_id={request_id} method={request.method} path={request.url.path}")
        response = await call_next(request)
        response.headers["X-Request-Id"] = request_id
        logger.info(f"request_id={request_id} status={response.status_code}")
        return response


app.add_middleware(ProcessRequestMiddleware)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(ad_blend_router, prefix="/ad-blend")


class HealthCheckResult(BaseModel):
    status: str
    message: Optional[str] = None


class OverallHealthStatus(BaseModel):
    status: str
    checks: Dict[str, HealthCheckResult]


@app.get("/health", response_model=OverallHealthStatus, tags=["Health"])
async def health_check():
    application_status = HealthCheckResult(status="ok", message="Application is running")
    gemini_status = check_gemini_config()

    all_checks = {
        "application": application_status,
        "gemini": gemini_status,
    }

    overall_status = "ok"
    if any(check.status == "unavailable" for check in all_checks.values()):
        overall_status = "unavailable"
    elif any(check.status == "degraded" for check in all_checks.values()):
        overall_status = "degraded"

    return OverallHealthStatus(status=overall_status, checks=all_checks)


def check_gemini_config() -> HealthCheckResult:
    logger.debug("Checking Gemini configuration.")
    if config.GOOGLE_API_KEY:
        return HealthCheckResult(status="ok", message=f"Gemini API key is configured (model={config.IMAGE_MODEL})")
    logger.warning("Gemini API key not found.")
    return HealthCheckResult(status="degraded", message="Gemini API key not found")
