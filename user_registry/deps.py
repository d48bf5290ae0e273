from __future__ import annotations

from fastapi import Request

from user_registry.settings import Settings, get_settings
from user_registry.user_store import InMemoryUserRegistry


def get_settings_dep() -> Settings:
    """FastAPI dependency for settings.

    Delegates to user_registry.settings.get_settings (canonical constructor).
    """
    return get_settings()


def get_registry(request: Request) -> InMemoryUserRegistry:
    # The registry is owned by the app instance built in create_app(); there is
    # no module-level store.
    return request.app.state.registry
