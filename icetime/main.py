"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from icetime.api import assistant, availability, bookings, facilities
from icetime.core.config import settings
from icetime.core.database import engine, init_db
from icetime.core.exceptions import StoreUnavailableError, describe_validation_errors

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Ice Rink Booking Service")
    logger.info(f"Debug mode: {settings.DEBUG}")
    await init_db()

    yield

    # Shutdown
    logger.info("Shutting down Ice Rink Booking Service")
    await engine.dispose()


# Create FastAPI app
app = FastAPI(
    title="Ice Rink Booking Service",
    description="Book ice time at local rinks over REST or through a voice assistant",
    version="1.0.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(facilities.router)
app.include_router(availability.router)
app.include_router(bookings.router)
app.include_router(assistant.router)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as 400 with a readable message."""
    return JSONResponse(
        status_code=400,
        content={"detail": describe_validation_errors(exc.errors())},
    )


@app.exception_handler(StoreUnavailableError)
async def store_unavailable_handler(request: Request, exc: StoreUnavailableError):
    logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=500, content={"detail": exc.message})


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


def run():
    """Serve the app with uvicorn on the configured host and port."""
    uvicorn.run(
        "icetime.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
