from collections.abc import Iterator

from fastapi import Request
from sqlalchemy.orm import Session

from boardcamp.core.config import Settings


def get_db(request: Request) -> Iterator[Session]:
    """Yield a session from the factory the app was built with."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
