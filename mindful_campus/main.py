import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from mindful_campus import config
from mindful_campus.db.gateway import PersistenceGateway
from mindful_campus.middleware import BodySizeLimitMiddleware
from mindful_campus.content.router import router as content_router
from mindful_campus.bookings.router import router as bookings_router
from mindful_campus.assessments.router import router as assessments_router
from mindful_campus.chat.router import router as chat_router
from mindful_campus.history.router import router as history_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    gateway = PersistenceGateway(config.DATABASE_URL, echo=config.DB_ECHO)
    await gateway.create_schema()
    app.state.gateway = gateway
    logger.info(f"Serving static files from {config.PUBLIC_DIR}")
    try:
        yield
    finally:
        await gateway.dispose()


app = FastAPI(title="Mindful Campus API", lifespan=lifespan)

app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=config.MAX_BODY_BYTES)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors and errors[0]["type"] == "json_invalid":
        return JSONResponse({"error": "Invalid JSON"}, status_code=400)
    # Only string parts of loc name fields; ints are list indexes or JSON offsets
    field = ".".join(part for part in errors[0]["loc"] if isinstance(part, str) and part != "body") if errors else ""
    detail = f"Invalid request body: {field}" if field else "Invalid request body"
    return JSONResponse({"error": detail}, status_code=400)


app.include_router(content_router)
app.include_router(bookings_router)
app.include_router(assessments_router)
app.include_router(chat_router)
app.include_router(history_router)


@app.get("/health")
def health():
    return {"status": "ok"}


# Registered last: anything no route claims is looked up under PUBLIC_DIR
app.mount("/", StaticFiles(directory=config.PUBLIC_DIR, html=True, check_dir=False), name="public")
