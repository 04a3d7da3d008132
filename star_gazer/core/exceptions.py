"""Core exception types shared across layers."""


class SkillError(Exception):
    """Base class for failures raised while serving a skill request."""


class InvalidRequestError(SkillError):
    """Raised when an inbound event does not match the request envelope."""


class InvalidApplicationIdError(SkillError):
    """Raised when a request targets a different skill application id."""


class ResponseAlreadySentError(SkillError):
    """Raised when a handler tries to emit a second response for one request."""


class ContentStoreError(SkillError):
    """Raised when constellation content cannot be loaded."""


__all__ = [
    "SkillError",
    "InvalidRequestError",
    "InvalidApplicationIdError",
    "ResponseAlreadySentError",
    "ContentStoreError",
]
