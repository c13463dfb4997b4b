from pathlib import Path
from typing import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

from app.api.routes import health, holdings
from app.domain.services.view_state_controller import ViewStateController
from app.infrastructure.holdings_source.static_source import StaticHoldingsSource

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture()
def fixture_path() -> Path:
    return FIXTURES_DIR / "holdings.json"


@pytest.fixture()
def sample_payload() -> dict:
    return {
        "userHolding": [
            {"symbol": "X", "quantity": 10, "ltp": 150, "avgPrice": 100, "close": 145},
            {"symbol": "Y", "quantity": 5, "ltp": 20.5, "avgPrice": 25, "close": 21},
        ]
    }


@pytest.fixture()
async def controller(sample_payload) -> AsyncGenerator[ViewStateController, None]:
    ctrl = ViewStateController(StaticHoldingsSource(payload=sample_payload))
    ctrl.request_load()
    await ctrl.wait_for_load()
    yield ctrl
    await ctrl.aclose()


@pytest.fixture()
async def app(controller) -> FastAPI:
    app = FastAPI()
    app.include_router(health.router, tags=["Health"])
    app.include_router(holdings.router, prefix="/api/v1/holdings", tags=["Holdings"])
    app.state.holdings_controller = controller
    return app


@pytest.fixture()
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
