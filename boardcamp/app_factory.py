from urllib.parse import urlparse

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from boardcamp.api.exception_handlers import register_exception_handlers
from boardcamp.api.router import api_router
from boardcamp.core.config import Settings
from boardcamp.core.logging_config import configure_logging
from boardcamp.db.base import build_engine, build_session_factory


def create_app(settings: Settings) -> FastAPI:
    """Build the API for the given settings.

    The engine and session factory live on app.state, so separate apps
    (e.g. one per test) never share a database.
    """
    configure_logging(settings.log_level)

    app = FastAPI(title="Boardcamp")
    app.state.settings = settings
    app.state.engine = build_engine(settings.database_url)
    app.state.session_factory = build_session_factory(app.state.engine)

    if settings.frontend_url:
        parsed = urlparse(settings.frontend_url)
        origin = f"{parsed.scheme}://{parsed.netloc}"
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[origin],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    else:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)
    app.include_router(api_router)

    @app.get("/health")
    @app.get("/check-server")
    def health():
        return {"status": "ok"}

    return app
