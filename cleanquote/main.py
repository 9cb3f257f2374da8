from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .database import engine, Base
from .routers import bookings, estimates

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger("cleanquote")

# Create tables (no migrations: the bookings table is the only one)
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="Cleaning Instant Quote",
    description=f"Instant residential and commercial cleaning estimates for {settings.COMPANY_NAME}",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(estimates.router, prefix="/api")
app.include_router(bookings.router, prefix="/api")

logger.info(f"Admin booking list {'enabled' if settings.ADMIN_TOKEN else 'disabled (ADMIN_TOKEN unset)'}")


@app.get("/health")
def health():
    return {"status": "ok", "app": "cleanquote"}


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """422 with each error's location and message; raw inputs are dropped (JSON cannot carry inf/NaN)."""
    errors = [{k: v for k, v in err.items() if k != "input"} for err in exc.errors()]
    logger.warning(f"Validation error at {request.url.path}: {errors}")
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(errors)})
