"""
FastAPI application entry point.

Configures and creates the FastAPI application with:
- Service lifecycle management
- Exception handlers
- CORS policy
- Router mounting
"""

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)

logger = logging.getLogger(__name__)

# Load environment variables first
if not load_dotenv():
    logger.warning(".env file not found")

# Import application components
from notify_relay import __version__  # noqa: E402
from notify_relay.api.errors import register_exception_handlers  # noqa: E402
from notify_relay.api.routers import notify_router, subscribe_router  # noqa: E402
from notify_relay.core.config import Settings, get_settings  # noqa: E402
from notify_relay.services import services_lifespan  # noqa: E402

# Methods and headers allowed on cross-origin requests
CORS_ALLOWED_METHODS = ["GET", "POST", "HEAD"]
CORS_ALLOWED_HEADERS = ["Origin", "Accept", "Content-Type", "X-Requested-With"]


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the relay application.

    Args:
        settings: Server settings; read from the environment when omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    application = FastAPI(
        title="Notify Relay",
        description="Relays notifications to Telegram and signups to beehiiv",
        version=__version__,
        lifespan=services_lifespan,
    )

    register_exception_handlers(application)

    origins = [settings.allowed_origins] if settings.allowed_origins else []
    application.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=CORS_ALLOWED_METHODS,
        allow_headers=CORS_ALLOWED_HEADERS,
    )

    application.include_router(notify_router)
    application.include_router(subscribe_router)

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    port = get_settings().port
    logger.info(f"Server running on port {port}...")
    uvicorn.run("notify_relay.main:app", host="0.0.0.0", port=port)
