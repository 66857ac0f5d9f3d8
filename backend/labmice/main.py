from contextlib import asynccontextmanager
import json
import os
import sys
import time

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy.exc import SQLAlchemyError

from .database import init_db, dispose_engine
from .errors import StoreError, ErrorKind, HTTP_STATUS
from .limits import limiter, testing
from .routes import users, mice, log_entries, labs

logger.remove()
logger.add(sys.stdout, level=os.getenv("LOG_LEVEL", "INFO"), format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}")

dsn = os.getenv("SENTRY_DSN")
if dsn:
    sentry_sdk.init(dsn=dsn, integrations=[FastApiIntegration()])

REQUEST_COUNT = Counter("request_count", "Total requests", ["method", "endpoint", "status"])
REQUEST_LATENCY = Histogram(
    "request_latency_seconds", "Request latency", ["endpoint"]
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield
    dispose_engine()


app = FastAPI(title="Lab Mice API", lifespan=lifespan)

origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials="*" not in origins,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.state.limiter = limiter
app.add_exception_handler(
    RateLimitExceeded,
    lambda r, e: JSONResponse({"message": "Too Many Requests"}, status_code=429),
)
if not testing:
    app.add_middleware(SlowAPIMiddleware)


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message, "kind": exc.kind.value},
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("database error on {} {}", request.method, request.url.path)
    return JSONResponse(
        status_code=HTTP_STATUS[ErrorKind.UNKNOWN],
        content={"message": "Unexpected database error", "kind": ErrorKind.UNKNOWN.value},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    detail = "malformed request"
    if errors:
        first = errors[0]
        where = ".".join(str(part) for part in first.get("loc", ()))
        detail = f"{where}: {first.get('msg')}" if where else str(first.get("msg"))
    return JSONResponse(
        status_code=HTTP_STATUS[ErrorKind.INVALID_VALUE],
        content={"message": f"Invalid request: {detail}", "kind": ErrorKind.INVALID_VALUE.value},
    )


@app.middleware("http")
async def record_metrics(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    elapsed = time.time() - start
    # label by route template so path parameters do not create new series
    route = request.scope.get("route")
    endpoint = getattr(route, "path", "unmatched")
    REQUEST_COUNT.labels(request.method, endpoint, str(response.status_code)).inc()
    REQUEST_LATENCY.labels(endpoint).observe(elapsed)
    logger.info(
        json.dumps(
            {
                "method": request.method,
                "path": request.url.path,
                "route": endpoint,
                "status_code": response.status_code,
                "duration_ms": int(elapsed * 1000),
                "client_ip": request.client.host if request.client else None,
            }
        )
    )
    return response


@app.get("/metrics")
def metrics():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)


app.include_router(users.router)
app.include_router(mice.router)
app.include_router(log_entries.router)
app.include_router(labs.router)
