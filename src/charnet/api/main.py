"""FastAPI application serving the 3D character network viewer."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI

from charnet import __version__
from charnet.api.graph import router as graph_router
from charnet.config import Settings, settings as default_settings
from charnet.ingestion import Dataset, load_dataset
from charnet.scene import build_scene

logger = logging.getLogger(__name__)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app_settings = app_settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Load the dataset and lay it out before serving any request."""
        logger.info("Starting charnet viewer...")

        path = Path(app_settings.dataset_path)
        if path.is_file():
            dataset = await load_dataset(path)
        else:
            logger.error(f"Dataset {path} not found, serving an empty graph")
            dataset = Dataset()

        # Malformed data (bad shape, dangling link) aborts startup
        app.state.settings = app_settings
        app.state.scene = build_scene(dataset, app_settings)

        yield

        logger.info("Shutting down charnet viewer...")

    app = FastAPI(
        title="charnet",
        description="Interactive 3D character co-occurrence network",
        version=__version__,
        lifespan=lifespan,
    )
    app.include_router(graph_router)
    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    uvicorn.run(
        "charnet.api.main:app",
        host=default_settings.api_host,
        port=default_settings.api_port,
        reload=default_settings.api_debug,
    )
