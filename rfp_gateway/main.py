from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from rfp_gateway.api_routes import router as api_router
from rfp_gateway.core.errors import GatewayError, ValidationError, status_for
from rfp_gateway.core.logging import configure_logging
from rfp_gateway.core.settings import Settings

configure_logging(Settings())
logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

app = FastAPI(title="RFP Gateway (FMEG)")

app.include_router(api_router)


@app.middleware("http")
async def cors(request: Request, call_next):
    # Browser preflight: answer directly, never reaches a handler
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)

    response = await call_next(request)
    for key, value in CORS_HEADERS.items():
        response.headers[key] = value
    return response


@app.exception_handler(GatewayError)
async def gateway_error(request: Request, exc: GatewayError):
    status = status_for(exc)
    logger.error("Error in %s (%s, %d): %s", request.url.path, type(exc).__name__, status, exc.message)
    return JSONResponse({"error": exc.message}, status_code=status)


@app.exception_handler(RequestValidationError)
async def request_validation_error(request: Request, exc: RequestValidationError):
    return await gateway_error(request, ValidationError(_describe_validation(exc)))


@app.exception_handler(Exception)
async def unexpected_error(request: Request, exc: Exception):
    logger.exception("Unhandled error in %s", request.url.path)
    return JSONResponse(
        {"error": f"{type(exc).__name__}: {exc}"},
        status_code=500,
        headers=CORS_HEADERS,
    )


def _describe_validation(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body") or "request body"
    return f"{field}: {first.get('msg', 'invalid value')}"
