from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from boardcamp.api.deps import get_db
from boardcamp.app_factory import create_app
from boardcamp.core.config import Settings
from boardcamp.db.base import build_engine, build_session_factory

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture(scope="function")
def database_url(tmp_path: Path) -> str:
    """Create a fresh SQLite database for each test and run migrations."""
    url = f"sqlite:///{tmp_path / 'test_boardcamp.db'}"

    # Run Alembic migrations to set up the database schema
    alembic_cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    alembic_cfg.set_main_option("sqlalchemy.url", url)
    command.upgrade(alembic_cfg, "head")

    return url


@pytest.fixture(scope="function")
def settings(database_url: str) -> Settings:
    return Settings(database_url=database_url, empty_list_message=None)


@pytest.fixture(scope="function")
def db_session(database_url: str):
    engine = build_engine(database_url)
    TestingSessionLocal = build_session_factory(engine)

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        # Dispose the engine to close all connections
        engine.dispose()


@pytest.fixture(scope="function")
def db(db_session):
    """Alias for db_session to match test naming conventions."""
    return db_session


@pytest.fixture(scope="function")
def make_client(db_session: Session):
    """Build a test client for given settings whose requests share the test session."""
    clients: list[TestClient] = []

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    def _make(settings: Settings) -> TestClient:
        app = create_app(settings)
        app.dependency_overrides[get_db] = override_get_db
        test_client = TestClient(app)
        clients.append(test_client)
        return test_client

    yield _make

    for test_client in clients:
        test_client.app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client(settings: Settings, make_client):
    """Create a test client with database dependency override."""
    return make_client(settings)


# ============================================================================
# DOMAIN FIXTURES
# ============================================================================


@pytest.fixture(scope="function")
def category(db: Session):
    from boardcamp.repositories.category import create_category

    return create_category(db, name="Strategy")


@pytest.fixture(scope="function")
def game(db: Session, category):
    """A single-copy game at 10 per day."""
    from boardcamp.repositories.game import create_game

    return create_game(
        db,
        name="Banco Imobiliário",
        image="http://example.com/banco.jpg",
        stock_total=1,
        category_id=category.id,
        price_per_day=Decimal("10"),
    )


@pytest.fixture(scope="function")
def customer(db: Session):
    from boardcamp.repositories.customer import create_customer

    return create_customer(
        db,
        name="João Alfredo",
        phone="21998899222",
        cpf="01234567890",
        birthday=date(1992, 10, 5),
    )


@pytest.fixture(scope="function")
def another_customer(db: Session):
    from boardcamp.repositories.customer import create_customer

    return create_customer(
        db,
        name="Maria Clara",
        phone="1133334444",
        cpf="98765432100",
    )


@pytest.fixture(scope="function")
def rent_game(db: Session):
    """Insert an open rental that started `days_ago` days before now."""
    from boardcamp.repositories.rental import insert_rental

    def _rent(customer, game, days_rented: int, days_ago: int = 0):
        rent_date = datetime.now(timezone.utc) - timedelta(days=days_ago)
        rental = insert_rental(
            db,
            customer_id=customer.id,
            game_id=game.id,
            rent_date=rent_date,
            days_rented=days_rented,
            original_price=Decimal(days_rented) * game.price_per_day,
        )
        db.commit()
        db.refresh(rental)
        return rental

    return _rent
