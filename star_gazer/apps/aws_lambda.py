"""AWS Lambda entrypoint.

Configure the function handler as ``star_gazer.apps.aws_lambda.handler``.
Errors propagate so the Lambda runtime reports the invocation as failed.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from star_gazer.bootstrap import build_default_service_container, build_executor
from star_gazer.services.executor import SkillExecutor


@lru_cache(maxsize=1)
def _executor() -> SkillExecutor:
    services = build_default_service_container()
    return build_executor(services)


def handler(event: dict[str, Any], context: Any) -> dict[str, Any] | None:
    """Serve one skill request."""
    return _executor().execute(event, context)


__all__ = ["handler"]
