"""Shared FastAPI dependencies for service access."""

from fastapi import Request

from star_gazer.bootstrap import build_executor
from star_gazer.services import ServiceContainer
from star_gazer.services.executor import SkillExecutor


def get_service_container(request: Request) -> ServiceContainer:
    """Retrieve the service container from app state."""
    services = getattr(request.app.state, "services", None)
    if not isinstance(services, ServiceContainer):
        raise RuntimeError("Service container is not configured on app.state.")
    return services


def get_executor(request: Request) -> SkillExecutor:
    """Return the executor cached on app state, building it on first use."""
    executor = getattr(request.app.state, "executor", None)
    if executor is None:
        executor = build_executor(get_service_container(request))
        request.app.state.executor = executor
    return executor


__all__ = ["get_service_container", "get_executor"]
