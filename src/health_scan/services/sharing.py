"""Social share text for health progress."""

from typing import Literal
from urllib.parse import urlencode

SharePlatform = Literal["facebook", "twitter", "instagram", "direct"]
SHARE_PLATFORMS: tuple[SharePlatform, ...] = (
    "facebook",
    "twitter",
    "instagram",
    "direct",
)


def generate_share_message(platform: str, score: int, streak: int) -> str:
    """Return the share message for a platform, defaulting to direct."""
    messages = {
        "facebook": (
            f"🌟 Just hit a {score}/100 health score on HealthScan! 💪 "
            f"On a {streak}-day healthy eating streak! "
            "Join me in making better food choices! #HealthyEating #HealthScan"
        ),
        "twitter": (
            f"🎯 Health Score: {score}/100\n🔥 Streak: {streak} days\n"
            "💚 Making smarter food choices with @HealthScan! #HealthyLiving"
        ),
        "instagram": (
            f"✨ Health journey update! Currently at {score}/100 with a "
            f"{streak}-day streak of healthy choices! 🥗💪 Who's joining me on "
            "this wellness adventure? #HealthScan #WellnessJourney #HealthyChoices"
        ),
        "direct": (
            f"Hey! I've been using HealthScan to track my food choices and I'm at "
            f"{score}/100 with a {streak}-day streak! You should try it too - "
            "it's really helping me eat healthier! 🌱"
        ),
    }
    return messages.get(platform, messages["direct"])


def build_share_text(platform: str, score: int, streak: int, base_url: str) -> str:
    """Return the full text to copy, with the app link for social platforms."""
    message = generate_share_message(platform, score, streak)
    if platform == "direct":
        return message
    return f"{message}\n\n{base_url}"


def build_share_link(score: int, streak: int, base_url: str) -> str:
    """Return a shareable progress link."""
    query = urlencode({"score": score, "streak": streak})
    return f"{base_url.rstrip('/')}/share?{query}"
