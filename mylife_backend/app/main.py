# mylife_backend/app/main.py: backend entrypoint
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mylife_backend.app.config import APP_ENV, CORS_ORIGINS, LOG_LEVEL
from mylife_backend.app.routers import api, notes, people, tags
from mylife_backend.app.services.errors import RecordError
from mylife_backend.app.services.router_helpers.responses import error
from mylife_backend.app.services.validation.field_validator import loc_to_param
from mylife_backend.app.utils.logging_setup import setup_logging

setup_logging(LOG_LEVEL)
log = logging.getLogger("mylife.api")

app = FastAPI(title="MyLife API")

# --- CORS for the web front end ----------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Error envelope -----------------------------------------------------------
@app.exception_handler(RecordError)
async def record_error_handler(request: Request, exc: RecordError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=error(exc.messages, exc.data))

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # body was not a JSON object (or not JSON at all)
    messages = [
        {"msg": e.get("msg", "Invalid request."), "param": loc_to_param(e.get("loc", ())[1:]), "location": str(e.get("loc", ("body",))[0])}
        for e in exc.errors()
    ]
    return JSONResponse(status_code=422, content=error(messages, getattr(exc, "body", None)))

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    log.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=error([str(exc) or type(exc).__name__]))

# --- Include routers under /api ----------------------------------------------
app.include_router(api.router, prefix="/api")
app.include_router(notes.router, prefix="/api")
app.include_router(people.router, prefix="/api")
app.include_router(tags.router, prefix="/api/tags")
app.include_router(tags.router, prefix="/api/tag", include_in_schema=False)

# --- Health ------------------------------------------------------------------
@app.get("/health")
async def health():
    return {"ok": True}

@app.on_event("startup")
async def _log_routes():
    from fastapi.routing import APIRoute
    log.info("MyLife API starting (env=%s)", APP_ENV)
    for r in app.router.routes:
        if isinstance(r, APIRoute):
            log.debug("%-10s %s", ",".join(sorted(r.methods)), r.path)
