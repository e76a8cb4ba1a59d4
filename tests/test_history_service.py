"""Tests for scan history service."""

from datetime import timedelta
from uuid import uuid4

from health_scan.services.history import ScanHistoryService
from tests.conftest import NOW, InMemoryScanHistoryRepository, make_product


def test_list_products_newest_first() -> None:
    service = ScanHistoryService(InMemoryScanHistoryRepository())
    user_id = uuid4()
    older = make_product(name="Older", scanned_at=NOW - timedelta(days=1))
    newer = make_product(name="Newer", scanned_at=NOW)

    service.save_product(user_id, older)
    service.save_product(user_id, newer)

    assert [product.name for product in service.list_products(user_id)] == [
        "Newer",
        "Older",
    ]


def test_clear_removes_only_that_users_history() -> None:
    service = ScanHistoryService(InMemoryScanHistoryRepository())
    user_id = uuid4()
    other_id = uuid4()
    service.save_product(user_id, make_product())
    service.save_product(other_id, make_product())

    service.clear(user_id)

    assert service.list_products(user_id) == []
    assert len(service.list_products(other_id)) == 1
