from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import time
import logging

from personacart import __version__
from personacart.config import settings
from personacart.db.init_db import initialize_database
from personacart.web.routes import auth, cart, product, profile
from personacart.web.utils.database import engine, mask_url, normalized_db_url

logger = logging.getLogger(__name__)

app = FastAPI(
    title="PersonaCart API",
    description="Family profiles, personalized product catalog and shopping cart",
    version=__version__
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def slow_request_middleware(request: Request, call_next):
    """Log requests chậm hơn settings.slow_request_seconds."""
    start_time = time.perf_counter()

    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(f"Request error: {request.method} {request.url.path} - {e}")
        raise

    process_time = time.perf_counter() - start_time
    if process_time > settings.slow_request_seconds:
        logger.warning(
            f"Slow request: {request.method} {request.url.path} "
            f"took {process_time:.2f}s"
        )

    return response


# Include routers
app.include_router(auth.router)
app.include_router(profile.router)
app.include_router(product.router)
app.include_router(cart.router)


@app.on_event("startup")
async def startup_event():
    """Tạo tables, seed catalog và log thông tin khởi động."""
    await initialize_database(engine, seed=settings.seed_products)

    logger.info(f"PersonaCart API {__version__} started")
    logger.info(f"API docs: http://{settings.host}:{settings.port}/docs")
    logger.info(f"Database: {mask_url(normalized_db_url)}")


@app.on_event("shutdown")
async def shutdown_event():
    await engine.dispose()


@app.get("/")
async def root():
    """Root endpoint - API information."""
    return {
        "name": "PersonaCart API",
        "version": __version__,
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok", "service": "personacart-api"}
