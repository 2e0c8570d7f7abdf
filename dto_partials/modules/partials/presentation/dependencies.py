# 📄 File: dto_partials/modules/partials/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Plugs the include/exclude request reading into FastAPI so endpoints can simply ask for it.
# 🧪 Purpose (Technical Summary):
# FastAPI dependencies providing request partials adapters and a shared resolver per request.
# 🔗 Dependencies:
# FastAPI, dto_partials.modules.partials.presentation.api, dto_partials.shared.config.settings
# 🔄 Connected Modules / Calls From:
# FastAPI endpoints returning data objects

"""
Partials Dependencies

Usage::

    @router.get("/songs/{song_id}")
    async def get_song(song_id: int, partials=Depends(get_request_partials)):
        return data_response(load_song(song_id), partials)
"""

from fastapi import Depends, Request

from dto_partials.modules.partials.domain.services.partials_tree_resolver import PartialsTreeFromRequestResolver
from dto_partials.modules.partials.presentation.api.request_partials import StarletteRequestPartials
from dto_partials.shared.config.settings import Settings, get_settings


def get_partials_settings() -> Settings:
    """Settings dependency, override in tests with app.dependency_overrides."""
    return get_settings()


def get_request_partials(
    request: Request,
    settings: Settings = Depends(get_partials_settings)
) -> StarletteRequestPartials:
    """Partials parameters of the current request."""
    return StarletteRequestPartials(request, settings)


def get_partials_resolver(
    settings: Settings = Depends(get_partials_settings)
) -> PartialsTreeFromRequestResolver:
    """Resolver configured with the current settings."""
    return PartialsTreeFromRequestResolver(settings=settings)
