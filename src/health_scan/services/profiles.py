"""Health profile service."""

from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from health_scan.domain.profile import UserProfile


class ProfileRepository(Protocol):
    """Persistence interface for health profiles."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the stored profile, if present."""

    def save_profile(self, profile: UserProfile) -> None:
        """Create or replace a profile."""

    def get_onboarding_completed(self, user_id: UUID) -> bool:
        """Return True when the user finished or skipped onboarding."""

    def set_onboarding_completed(self, user_id: UUID) -> None:
        """Mark onboarding as finished."""


@dataclass
class ProfileService:
    """Service for the health profile lifecycle."""

    repository: ProfileRepository

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the user's profile, if configured."""
        return self.repository.get_profile(user_id)

    def save_profile(self, profile: UserProfile) -> UserProfile:
        """Persist a profile, keeping the original creation time."""
        now = datetime.now(tz=UTC)
        existing = self.repository.get_profile(profile.id)
        created_at = existing.created_at if existing else now
        saved = replace(profile, created_at=created_at, updated_at=now)
        self.repository.save_profile(saved)
        return saved

    def complete_onboarding(self, profile: UserProfile | None) -> UserProfile | None:
        """Finish onboarding, saving the profile unless it was skipped."""
        saved = None
        if profile is not None:
            saved = self.save_profile(profile)
            self.repository.set_onboarding_completed(profile.id)
        return saved

    def skip_onboarding(self, user_id: UUID) -> None:
        """Mark onboarding finished without a profile."""
        self.repository.set_onboarding_completed(user_id)

    def has_completed_onboarding(self, user_id: UUID) -> bool:
        """Return True when onboarding does not need to be shown."""
        if self.repository.get_profile(user_id) is not None:
            return True
        return self.repository.get_onboarding_completed(user_id)
