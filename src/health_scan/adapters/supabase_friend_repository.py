"""Supabase repository for the friends leaderboard."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from health_scan.services.dashboard import FriendRepository


@dataclass
class SupabaseFriendRepository(FriendRepository):
    """Supabase implementation for friend scores."""

    client: Client

    def list_friend_scores(self, user_id: UUID) -> list[int]:
        """Return the current scores of a user's friends."""
        response = (
            self.client.table("friends")
            .select("current_score")
            .eq("user_id", str(user_id))
            .execute()
        )
        return [int(row.get("current_score", 0)) for row in response.data or []]
