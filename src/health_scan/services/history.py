"""Scan history service."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from health_scan.domain.products import ScannedProduct


class ScanHistoryRepository(Protocol):
    """Persistence interface for saved product scans."""

    def add_product(self, user_id: UUID, product: ScannedProduct) -> None:
        """Store a scanned product."""

    def list_products(self, user_id: UUID) -> list[ScannedProduct]:
        """Return all stored products for a user."""

    def clear(self, user_id: UUID) -> None:
        """Remove every stored product for a user."""


@dataclass
class ScanHistoryService:
    """Service for a user's saved scans."""

    repository: ScanHistoryRepository

    def save_product(self, user_id: UUID, product: ScannedProduct) -> None:
        """Add a product to the user's history."""
        self.repository.add_product(user_id, product)

    def list_products(self, user_id: UUID) -> list[ScannedProduct]:
        """Return saved products, newest first."""
        return sorted(
            self.repository.list_products(user_id),
            key=lambda product: product.scanned_at,
            reverse=True,
        )

    def clear(self, user_id: UUID) -> None:
        """Delete the user's history."""
        self.repository.clear(user_id)
