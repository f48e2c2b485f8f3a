import os

# Must be set before inventory_api.core.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from inventory_api.db import database, models
from inventory_api.db.store import ProductStore
from inventory_api.main import app

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
database.register_sqlite_functions(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    models.Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        models.Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[database.get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_product(db_session):
    """Insert a product straight through the store, bypassing API defaults."""
    store = ProductStore(db_session)

    def _make(**overrides):
        fields = {
            "name": "Figure A",
            "category": "Figure",
            "price": 10.0,
            "stock": 5,
            "supplier": None,
            "min_stock": None,
            "last_restock_date": None,
        }
        fields.update(overrides)
        return store.create(fields)

    return _make
