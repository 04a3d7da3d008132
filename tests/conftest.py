"""Pytest configuration: ensure env vars and import path are set early.

This runs before any tests, so modules can import without local path hacks.
Also load .env before setting defaults so local overrides are honored.
"""
from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Ensure repository root is on sys.path for local package imports
sys.path.append(str(Path(__file__).resolve().parents[1]))

load_dotenv(override=False)

# Keep test logs out of the working tree and never require an application id
os.environ.setdefault("STAR_GAZER_LOG_DIR", tempfile.mkdtemp(prefix="star-gazer-logs-"))
os.environ.pop("STAR_GAZER_APP_ID", None)

# pylint: disable=wrong-import-position
from star_gazer.adapters.content import JsonContentStore  # noqa: E402
from star_gazer.services import ServiceContainer, build_default_services  # noqa: E402
from star_gazer.services.executor import SkillExecutor  # noqa: E402
from star_gazer.services.skill import StarGazerSkill  # noqa: E402

URSA_MINOR_INFO = "Ursa Minor is home to Polaris, the North Star. "
URSA_MINOR_MYTH = "Zeus lifted the bear cub Arcas into the sky by its tail. "
LEO_INFO = "Leo is a zodiac constellation of the spring sky. "
PERSEUS_MYTH = "Perseus beheaded the gorgon Medusa. "


@pytest.fixture
def content_store() -> JsonContentStore:
    """Small content tables with deliberately uneven coverage."""
    return JsonContentStore(
        info={"ursa minor": URSA_MINOR_INFO, "leo": LEO_INFO},
        myth={"ursa minor": URSA_MINOR_MYTH, "perseus": PERSEUS_MYTH},
    )


@pytest.fixture
def services(content_store: JsonContentStore) -> ServiceContainer:
    """Default service container over the test content."""
    return build_default_services(content_port=content_store)


@pytest.fixture
def executor(services: ServiceContainer) -> SkillExecutor:
    """Executor without an application id check."""
    return SkillExecutor(StarGazerSkill(services))
