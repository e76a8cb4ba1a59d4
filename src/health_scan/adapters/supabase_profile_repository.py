"""Supabase repository for health profiles."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from health_scan.domain.profile import UserProfile
from health_scan.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile persistence."""

    client: Client

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the stored profile for a user."""
        response = (
            self.client.table("health_profiles")
            .select(
                "user_id, weight, weight_unit, health_conditions, allergies, "
                "dietary_restrictions, created_at, updated_at"
            )
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def save_profile(self, profile: UserProfile) -> None:
        """Insert or replace the profile row."""
        self.client.table("health_profiles").upsert(
            {
                "user_id": str(profile.id),
                "weight": profile.weight,
                "weight_unit": profile.weight_unit,
                "health_conditions": profile.health_conditions,
                "allergies": profile.allergies,
                "dietary_restrictions": profile.dietary_restrictions,
                "created_at": profile.created_at.isoformat(),
                "updated_at": profile.updated_at.isoformat(),
            },
            on_conflict="user_id",
        ).execute()

    def get_onboarding_completed(self, user_id: UUID) -> bool:
        """Return the stored onboarding flag."""
        response = (
            self.client.table("user_settings")
            .select("onboarding_completed")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return False
        return bool(response.data[0].get("onboarding_completed"))

    def set_onboarding_completed(self, user_id: UUID) -> None:
        """Store the onboarding flag."""
        self.client.table("user_settings").upsert(
            {
                "user_id": str(user_id),
                "onboarding_completed": True,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id",
        ).execute()


def _parse_row(row: dict[str, object]) -> UserProfile:
    return UserProfile(
        id=UUID(str(row["user_id"])),
        weight=float(row.get("weight") or 0.0),
        weight_unit="lbs" if row.get("weight_unit") == "lbs" else "kg",
        health_conditions=list(row.get("health_conditions") or []),
        allergies=list(row.get("allergies") or []),
        dietary_restrictions=list(row.get("dietary_restrictions") or []),
        created_at=_parse_timestamp(row.get("created_at")),
        updated_at=_parse_timestamp(row.get("updated_at")),
    )


def _parse_timestamp(raw: object) -> datetime:
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return datetime.min.replace(tzinfo=UTC)
