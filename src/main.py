"""
Main FastAPI application entry point.
Configures and initializes the S3 Object Gateway.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from mangum import Mangum
from src.core import config
from src.core.exception_handler import register_exception_handlers
from src.core.exceptions import ConfigurationException
from src.core.logging_config import setup_logging
from src.api.routes import health_routes, object_routes

setup_logging(config.settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # No point serving requests that can never reach S3
    if not config.settings.has_credentials:
        logger.error("exiting: missing aws access credentials")
        raise ConfigurationException("Missing AWS access credentials")
    yield


# Create FastAPI application
app = FastAPI(
    title=config.settings.api_title,
    version=config.settings.api_version,
    description="HTTP gateway writing batches of key/value pairs to S3",
    lifespan=lifespan
)

# Register exception handlers
register_exception_handlers(app)

# Register routes
app.include_router(health_routes.router)
app.include_router(object_routes.router)

# Middleware to log request paths
@app.middleware("http")
async def log_request(request: Request, call_next):
    logger.info("%s %s", request.method, request.url.path)
    response = await call_next(request)
    return response

# Lambda handler for AWS
handler = Mangum(app, lifespan="off")


# For local development
if __name__ == "__main__":
    import uvicorn
    logger.info("App listening on port %d", config.settings.port)
    uvicorn.run(app, host="0.0.0.0", port=config.settings.port)
