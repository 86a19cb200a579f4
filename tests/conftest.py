"""Shared fixtures for identigen tests."""

from __future__ import annotations

import pytest

from identigen.services.digest_service import DigestService
from identigen.services.identicon_service import IdenticonService
from identigen.services.image_service import ImageService
from identigen.services.pattern_service import PatternService
from identigen.services.render_service import RenderService

ALICE_HEX = "2bd806c97f0e00af1a1fc3328fa763a9269723c8db8fac4f93af71db186d6e90"
EMPTY_HEX = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


@pytest.fixture()
def digests() -> DigestService:
    return DigestService()


@pytest.fixture()
def patterns() -> PatternService:
    return PatternService()


@pytest.fixture()
def renderer() -> RenderService:
    return RenderService()


@pytest.fixture()
def identicons() -> IdenticonService:
    return IdenticonService()


@pytest.fixture()
def images() -> ImageService:
    return ImageService()


@pytest.fixture()
def alice_digest() -> bytes:
    return bytes.fromhex(ALICE_HEX)


@pytest.fixture()
def empty_digest() -> bytes:
    return bytes.fromhex(EMPTY_HEX)
