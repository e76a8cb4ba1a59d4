"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from health_scan.adapters.openai_vision_client import OpenAIVisionClient
from health_scan.adapters.static_image_analyzer import StaticImageAnalyzer
from health_scan.adapters.supabase_friend_repository import SupabaseFriendRepository
from health_scan.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from health_scan.adapters.supabase_scan_history_repository import (
    SupabaseScanHistoryRepository,
)
from health_scan.config import ANALYZER_OPENAI, Settings, parse_analyzer_name
from health_scan.services.analysis import FoodAnalysisService, ImageAnalyzer
from health_scan.services.dashboard import HealthDashboardService
from health_scan.services.history import ScanHistoryService
from health_scan.services.profiles import ProfileService
from health_scan.services.vision import VisionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    profile_service: ProfileService
    history_service: ScanHistoryService
    analysis_service: FoodAnalysisService
    dashboard_service: HealthDashboardService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    profile_service = ProfileService(SupabaseProfileRepository(supabase_client))
    history_service = ScanHistoryService(
        SupabaseScanHistoryRepository(supabase_client)
    )
    dashboard_service = HealthDashboardService(
        friend_repository=SupabaseFriendRepository(supabase_client)
    )

    openai_client: OpenAIVisionClient | None = None
    analyzer: ImageAnalyzer
    if parse_analyzer_name(resolved_settings.image_analyzer) == ANALYZER_OPENAI:
        if not resolved_settings.openai_api_key:
            raise ValueError("OPENAI_API_KEY is required for the openai analyzer")
        openai_client = OpenAIVisionClient.create(
            resolved_settings.openai_api_key,
            model=resolved_settings.openai_model,
            reasoning_effort=resolved_settings.openai_reasoning_effort,
            store=resolved_settings.openai_store,
        )
        analyzer = VisionService(client=openai_client)
    else:
        analyzer = StaticImageAnalyzer(
            delay_seconds=resolved_settings.static_analysis_delay_seconds
        )
    analysis_service = FoodAnalysisService(
        analyzer=analyzer, debug=resolved_settings.debug
    )

    async def close_resources() -> None:
        if openai_client is not None:
            await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        profile_service=profile_service,
        history_service=history_service,
        analysis_service=analysis_service,
        dashboard_service=dashboard_service,
        close_resources=close_resources,
    )
