"""
FastAPI Application Entry Point for pokerround.

This module creates and configures the FastAPI application with:
- HTTP routes for round management
- A round registry on ``app.state``
- A handler turning core errors into JSON 400 responses
- CORS middleware for development
"""

import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pokerround import __version__
from pokerround.core.errors import PokerError
from pokerround.server.registry import RoundRegistry
from pokerround.server.routes import router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


async def poker_error_handler(request: Request, exc: PokerError) -> JSONResponse:
    """Report a rejected core operation."""
    logger.debug(f"{request.method} {request.url.path} rejected: {exc.kind}: {exc}")
    return JSONResponse(
        status_code=400,
        content={"error": exc.kind, "detail": str(exc)},
    )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="pokerround",
        description="Hold'em / Omaha round simulator with an HTTP API",
        version=__version__,
    )

    # CORS middleware for development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.registry = RoundRegistry()
    app.add_exception_handler(PokerError, poker_error_handler)
    app.include_router(router)

    logger.info("pokerround app created")
    return app


# Create the application instance
app = create_app()


def main():
    """Run the server (for use as entry point)."""
    import uvicorn
    uvicorn.run(
        "pokerround.server.app:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
