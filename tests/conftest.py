"""Shared fixtures: a throwaway SQLite catalog, a fake clock and an HTTP client."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from catalog.database.database import build_engine, get_db, init_db
from catalog.database.dependencies import get_token_issuer
from catalog.main import app
from catalog.services.product import ProductService
from catalog.utils.tokens import TokenIssuer

TTL_MS = 30 * 60000

BASE_FIELDS = {
    "name": "Item",
    "category": "General",
    "price": 10.0,
}

VARIANT_FIELDS = {
    1: {"features": ["bluetooth"]},
    2: {"ingredients": ["wheat", "salt"], "weightOrVolume": "500g"},
    3: {"specs": {"engine": "V6"}, "modelYear": 2020},
    4: {"sizesAvailable": ["S", "M"], "colors": ["red"], "material": "cotton"},
}


def product_payload(product_id: int, number_category: int = 1, **overrides) -> dict:
    payload = {"id": product_id, "numberCategory": number_category, **BASE_FIELDS}
    payload.update(VARIANT_FIELDS.get(number_category, {}))
    payload.update(overrides)
    return payload


class FakeClock:
    """Epoch-millisecond clock that only moves when told to."""

    def __init__(self, now: int = 1_700_000_000_000):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def make_payload():
    return product_payload


@pytest.fixture
def engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'catalog.db'}", timeout=30)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def service(db):
    return ProductService(db)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def issuer(clock):
    return TokenIssuer("test-secret", TTL_MS, clock=clock)


@pytest.fixture
def client(session_factory, issuer):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_token_issuer] = lambda: issuer
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(issuer):
    return {"Authorization": f"Bearer {issuer.issue('secret')}"}
