from unittest.mock import MagicMock

import pytest

from models.requirement import Requirement, RequirementDto
from repositories.requirement_repo import RequirementRepository
from security import rate_limiter


@pytest.fixture()
def requirement_dto() -> RequirementDto:
    return RequirementDto(title="Test Requirement", description="Test Description")


@pytest.fixture()
def requirement() -> Requirement:
    return Requirement(
        uuid="test-uuid",
        req_id=1,
        title="Test Requirement",
        description="Test Description",
    )


@pytest.fixture()
def repo() -> MagicMock:
    return MagicMock(spec=RequirementRepository)


@pytest.fixture(autouse=True)
def _clear_rate_limits():
    rate_limiter.reset()
    yield
    rate_limiter.reset()
