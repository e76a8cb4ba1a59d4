"""Supabase repository for saved product scans."""

from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from health_scan.domain.products import NutritionFacts, ProductWarning, ScannedProduct
from health_scan.services.history import ScanHistoryRepository


@dataclass
class SupabaseScanHistoryRepository(ScanHistoryRepository):
    """Supabase implementation for scan history."""

    client: Client

    def add_product(self, user_id: UUID, product: ScannedProduct) -> None:
        """Insert a scanned product row."""
        response = (
            self.client.table("scanned_products")
            .insert(
                {
                    "id": str(product.id),
                    "user_id": str(user_id),
                    "name": product.name,
                    "image_url": product.image_url,
                    "ingredients": product.ingredients,
                    "nutrition_facts": (
                        asdict(product.nutrition_facts)
                        if product.nutrition_facts
                        else None
                    ),
                    "risk_level": product.risk_level,
                    "compatibility_score": product.compatibility_score,
                    "warnings": [asdict(warning) for warning in product.warnings],
                    "alternatives": product.alternatives,
                    "scanned_at": product.scanned_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save scanned product")

    def list_products(self, user_id: UUID) -> list[ScannedProduct]:
        """Return stored products, newest first."""
        response = (
            self.client.table("scanned_products")
            .select(
                "id, name, image_url, ingredients, nutrition_facts, risk_level, "
                "compatibility_score, warnings, alternatives, scanned_at"
            )
            .eq("user_id", str(user_id))
            .order("scanned_at", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def clear(self, user_id: UUID) -> None:
        """Delete all products for a user."""
        self.client.table("scanned_products").delete().eq(
            "user_id", str(user_id)
        ).execute()


def _parse_row(row: dict[str, object]) -> ScannedProduct:
    nutrition_raw = row.get("nutrition_facts")
    scanned_at_raw = row.get("scanned_at")
    return ScannedProduct(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        image_url=str(row.get("image_url") or ""),
        ingredients=list(row.get("ingredients") or []),
        nutrition_facts=(
            NutritionFacts(**nutrition_raw) if isinstance(nutrition_raw, dict) else None
        ),
        risk_level=str(row.get("risk_level", "low")),
        compatibility_score=int(row.get("compatibility_score", 0)),
        scanned_at=(
            datetime.fromisoformat(scanned_at_raw)
            if isinstance(scanned_at_raw, str) and scanned_at_raw
            else datetime.min.replace(tzinfo=UTC)
        ),
        warnings=[ProductWarning(**warning) for warning in row.get("warnings") or []],
        alternatives=list(row.get("alternatives") or []),
    )
