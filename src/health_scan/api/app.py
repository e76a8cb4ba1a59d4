"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import Literal
from uuid import UUID
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import FastAPI, HTTPException, Request, status

from health_scan.api.schemas import (
    OnboardingRequest,
    ProductPayload,
    ProfilePayload,
    ScanRequest,
)
from health_scan.app_logging import configure_logging
from health_scan.containers import AppContainer
from health_scan.services.dashboard import MONTHLY_TREND_DAYS, WEEKLY_TREND_DAYS
from health_scan.services.sharing import (
    SHARE_PLATFORMS,
    build_share_link,
    build_share_text,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/users/{user_id}/profile")
    async def get_profile(user_id: UUID, request: Request) -> dict[str, object]:
        """Return the user's health profile."""
        state_container: AppContainer = request.app.state.container
        profile = state_container.profile_service.get_profile(user_id)
        if profile is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found"
            )
        return {"profile": profile}

    @app.put("/users/{user_id}/profile")
    async def put_profile(
        user_id: UUID, payload: ProfilePayload, request: Request
    ) -> dict[str, object]:
        """Create or update the user's health profile."""
        state_container: AppContainer = request.app.state.container
        profile = payload.to_domain(user_id, datetime.now(tz=UTC))
        saved = state_container.profile_service.save_profile(profile)
        logger.info("Profile updated: user_id=%s", user_id)
        return {"profile": saved}

    @app.get("/users/{user_id}/onboarding")
    async def get_onboarding(user_id: UUID, request: Request) -> dict[str, bool]:
        """Return whether onboarding still needs to be shown."""
        state_container: AppContainer = request.app.state.container
        completed = state_container.profile_service.has_completed_onboarding(user_id)
        return {"completed": completed}

    @app.post("/users/{user_id}/onboarding")
    async def post_onboarding(
        user_id: UUID, payload: OnboardingRequest, request: Request
    ) -> dict[str, object]:
        """Finish onboarding with a profile, or skip it."""
        state_container: AppContainer = request.app.state.container
        if payload.profile is None:
            state_container.profile_service.skip_onboarding(user_id)
            return {"profile": None}
        profile = payload.profile.to_domain(user_id, datetime.now(tz=UTC))
        saved = state_container.profile_service.complete_onboarding(profile)
        return {"profile": saved}

    @app.post("/users/{user_id}/scans")
    async def scan_product(
        user_id: UUID, payload: ScanRequest, request: Request
    ) -> dict[str, object]:
        """Analyze a product image against the user's profile."""
        state_container: AppContainer = request.app.state.container
        profile = state_container.profile_service.get_profile(user_id)
        if profile is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Set up your health profile before scanning",
            )
        try:
            product = await state_container.analysis_service.analyze(
                payload.image_data, profile
            )
        except Exception as exc:
            logger.exception("Food analysis failed: user_id=%s", user_id)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Unable to analyze the product. Please try again.",
            ) from exc
        return {"product": product}

    @app.get("/users/{user_id}/history")
    async def list_history(user_id: UUID, request: Request) -> dict[str, object]:
        """Return saved scans, newest first."""
        state_container: AppContainer = request.app.state.container
        return {"products": state_container.history_service.list_products(user_id)}

    @app.post("/users/{user_id}/history")
    async def save_history(
        user_id: UUID, payload: ProductPayload, request: Request
    ) -> dict[str, str]:
        """Save an analyzed product to the user's history."""
        state_container: AppContainer = request.app.state.container
        state_container.history_service.save_product(user_id, payload.to_domain())
        return {"status": "ok"}

    @app.delete("/users/{user_id}/history")
    async def clear_history(user_id: UUID, request: Request) -> dict[str, str]:
        """Delete the user's scan history."""
        state_container: AppContainer = request.app.state.container
        state_container.history_service.clear(user_id)
        logger.info("History cleared: user_id=%s", user_id)
        return {"status": "ok"}

    @app.get("/users/{user_id}/dashboard")
    async def dashboard(
        user_id: UUID,
        request: Request,
        view: Literal["weekly", "monthly"] = "weekly",
        timezone: str = "UTC",
    ) -> dict[str, object]:
        """Return health score stats, achievements and trends."""
        if not _is_valid_timezone(timezone):
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"Unknown timezone: {timezone}",
            )
        state_container: AppContainer = request.app.state.container
        products = state_container.history_service.list_products(user_id)
        summary = state_container.dashboard_service.build(
            user_id,
            products,
            trend_days=WEEKLY_TREND_DAYS if view == "weekly" else MONTHLY_TREND_DAYS,
            timezone_name=timezone,
        )
        return {
            "stats": summary.stats,
            "achievements": summary.achievements,
            "message": summary.message,
            "entries": summary.entries,
            "trend": summary.trend,
        }

    @app.get("/users/{user_id}/share/{platform}")
    async def share(user_id: UUID, platform: str, request: Request) -> dict[str, str]:
        """Return share text and link for the user's current progress."""
        if platform not in SHARE_PLATFORMS:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Unknown platform"
            )
        state_container: AppContainer = request.app.state.container
        products = state_container.history_service.list_products(user_id)
        stats = state_container.dashboard_service.build(user_id, products).stats
        base_url = state_container.settings.share_base_url
        return {
            "text": build_share_text(
                platform, stats.current_score, stats.streak, base_url
            ),
            "link": build_share_link(stats.current_score, stats.streak, base_url),
        }

    return app


def _is_valid_timezone(value: str) -> bool:
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return False
    return True
