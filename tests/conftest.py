from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.rate_limit import limiter
from app.main import app
from app.prompt_generator.types import Complexity, Domain, Intent, Profile, Specificity, Urgency

# Rate limits are per client address; every test client shares one
limiter.enabled = False


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def make_profile():
    """Build a Profile with neutral defaults, overriding only what a test cares about."""

    def _make(**overrides) -> Profile:
        fields = {
            "topic": "",
            "intent": Intent.CREATE,
            "specificity": Specificity.VAGUE,
            "keywords": (),
            "complexity": Complexity.SIMPLE,
            "domain": Domain.GENERAL,
            "urgency": Urgency.LOW,
        }
        fields.update(overrides)
        fields["keywords"] = tuple(fields["keywords"])
        return Profile(**fields)

    return _make
