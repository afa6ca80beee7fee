"""
Order service API. Orders live in an in-process OrderStore held on app.state.
Run: python -m order_service.main  (HOST / PORT / DEV_LOGGING from env or .env)
"""
import logging
import sys
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from order_service.config import settings
from order_service.errors import ApiError, BadRequestError, InternalError
from order_service.metrics import (
    get_metrics_bytes,
    get_metrics_content_type,
    http_request_duration_seconds,
    http_requests_total,
)
from order_service.routes import orders
from order_service.store import OrderStore

logger = logging.getLogger(__name__)


def configure_logging(dev_logging: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if dev_logging else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stdout,
    )


def _decoder_message(exc: RequestValidationError) -> str:
    """First decode error as "<field path>: <reason>", e.g. "items.0: Input should be a valid string"."""
    errors = exc.errors()
    if not errors:
        return "malformed request"
    err = errors[0]
    msg = err.get("msg", "malformed request")
    if err.get("type") == "json_invalid":
        cause = (err.get("ctx") or {}).get("error")
        return f"{msg}: {cause}" if cause else msg
    loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "path", "query")]
    return f"{'.'.join(loc)}: {msg}" if loc else msg


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.dev_logging)
    logger.info("Order service started (dev_logging=%s)", settings.dev_logging)
    yield
    logger.info("Order service shutting down")


def create_app(store: OrderStore | None = None) -> FastAPI:
    app = FastAPI(title="Order Service", lifespan=lifespan)
    app.state.store = store if store is not None else OrderStore()
    app.include_router(orders.router)

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        logger.info("%s %s -> %d %s", request.method, request.url.path, exc.http_status, exc.message)
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def decode_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        err = BadRequestError(_decoder_message(exc))
        logger.info("%s %s -> 400 %s", request.method, request.url.path, err.message)
        return JSONResponse(status_code=err.http_status, content=err.to_response())

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        uri = request.url.path + (f"?{request.url.query}" if request.url.query else "")
        logger.info("Incoming: %s %s", request.method, uri)
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
            err = InternalError()
            response = JSONResponse(status_code=err.http_status, content=err.to_response())
        elapsed = time.perf_counter() - start
        logger.info("Response: %d (took %.2fms)", response.status_code, elapsed * 1000)
        http_requests_total.labels(method=request.method, status_code=str(response.status_code)).inc()
        http_request_duration_seconds.labels(method=request.method).observe(elapsed)
        return response

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    @app.get("/metrics")
    async def metrics() -> Response:
        """Prometheus scrape endpoint."""
        return Response(
            content=get_metrics_bytes(),
            media_type=get_metrics_content_type(),
        )

    return app


app = create_app()


def main() -> None:
    configure_logging(settings.dev_logging)
    print(f"Server running at http://{settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="info" if settings.dev_logging else "warning")


if __name__ == "__main__":
    main()
