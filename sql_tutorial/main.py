# main.py
from fastapi.middleware.cors import CORSMiddleware
import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from rich.console import Console
from rich.panel import Panel
from .api.router import router
from .config import TutorialSettings, settings as default_settings
from .workflow import TutorialWorkflow

logger = logging.getLogger(__name__)
console = Console()

API_VERSION = "1.0.0"


def create_app(settings: Optional[TutorialSettings] = None) -> FastAPI:
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        console.print(Panel("Health SQL Tutorial API starting up", border_style="green"))
        logger.info(f"API Version: {API_VERSION}")

        # One session per process, shared by every route
        app.state.workflow = TutorialWorkflow(settings).setup()
        logger.info(f"Tables loaded: {', '.join(app.state.workflow.list_tables())}")

        try:
            yield
        finally:
            # Shutdown
            app.state.workflow.close()
            console.print(Panel("Health SQL Tutorial API shutting down", border_style="red"))

    app = FastAPI(
        title="Health SQL Tutorial API",
        description="Step-by-step SQL lessons over a public health dataset loaded into DuckDB",
        version=API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    app.include_router(router=router)
    return app


logging.basicConfig(level=default_settings.LOG_LEVEL)

app = create_app()
