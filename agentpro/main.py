import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict, Optional

from fastapi import FastAPI, Request

from agentpro.config import Settings
from agentpro.container import AppContainer, get_container
from agentpro.routers.chats import router as chats_router
from agentpro.routers.players import router as players_router
from agentpro.routers.session import router as session_router

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(
    settings: Optional[Settings] = None, container: Optional[AppContainer] = None
) -> FastAPI:
    """Build the API around an explicitly constructed service container."""
    settings = settings or Settings.from_env()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Handle application startup and shutdown."""
        # Startup
        app.state.container = container or AppContainer(settings)
        logger.info(f"Agent Pro service started (env={settings.env})")
        yield
        # Shutdown
        await app.state.container.close()

    app = FastAPI(
        title="Agent Pro Service",
        description="Sessions, roster and agent/player messaging",
        version=settings.commit_hash or "dev",
        lifespan=lifespan,
    )

    # Include routers
    app.include_router(session_router, prefix="/api/session", tags=["session"])
    app.include_router(chats_router, prefix="/api/chats", tags=["chats"])
    app.include_router(players_router, prefix="/api/players", tags=["players"])

    @app.get("/health")
    async def health_check(request: Request) -> Dict[str, Optional[str]]:
        """Health check endpoint."""
        container = get_container(request)
        return {
            "status": "healthy",
            "environment": settings.env,
            "version": settings.commit_hash,
            "session_state": container.session_manager.state.value,
        }

    return app


app = create_app()


# If run directly, start the server
if __name__ == "__main__":
    import uvicorn

    current = Settings.from_env()
    uvicorn.run(app, host=current.host, port=current.port)
