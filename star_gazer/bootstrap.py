"""Application bootstrap helpers for assembling the service container."""

from __future__ import annotations

from star_gazer.adapters.content import load_content_store
from star_gazer.core.config import settings
from star_gazer.services import ServiceContainer, build_default_services
from star_gazer.services.executor import SkillExecutor
from star_gazer.services.skill import StarGazerSkill


def build_default_service_container() -> ServiceContainer:
    """Return the default service container wired to the packaged content."""

    return build_default_services(content_port=load_content_store())


def build_executor(services: ServiceContainer) -> SkillExecutor:
    """Return an executor for the Star Gazer skill over ``services``."""

    return SkillExecutor(StarGazerSkill(services), application_id=settings.STAR_GAZER_APP_ID)


__all__ = ["build_default_service_container", "build_executor"]
