from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from ..core.dependencies import get_ledger_service
from ..main import app
from ..services import AccountsRepository, LedgerService, NotificationService


@pytest.fixture
def notification_service() -> Mock:
    return Mock(spec=NotificationService)


@pytest.fixture
def service(notification_service: Mock) -> LedgerService:
    ledger = LedgerService(AccountsRepository(), notification_service)
    yield ledger
    ledger.repository.clear_accounts()


@pytest.fixture
def client(service: LedgerService) -> TestClient:
    app.dependency_overrides[get_ledger_service] = lambda: service

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
