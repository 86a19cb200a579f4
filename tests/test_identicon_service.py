"""End-to-end tests for the seed -> image pipeline."""

from __future__ import annotations

import numpy as np
import pytest

from identigen.config import BACKGROUND, IdenticonConfigError
from identigen.models.identicon_model import IdenticonParams
from identigen.services.identicon_service import DEFAULT_PARAMS, IdenticonService

REFERENCE = IdenticonParams(image_size=100, grid_size=5, padding_percent=8)


class TestCreateIdenticon:
    def test_alice_reference(self, identicons: IdenticonService) -> None:
        identicon = identicons.create_identicon("alice", REFERENCE)

        assert identicon.seed == "alice"
        assert identicon.digest_hex.startswith("2bd806c9")
        assert identicon.color.as_tuple() == (75, 177, 53)
        assert identicon.image.size == (100, 100)
        cells = identicon.grid.cells
        assert (cells[:, 0] == cells[:, 4]).all()
        assert (cells[:, 1] == cells[:, 3]).all()

    def test_bit_identical_reruns(self, identicons: IdenticonService) -> None:
        first = identicons.create_identicon("alice", REFERENCE)
        second = IdenticonService().create_identicon("alice", REFERENCE)
        assert first.image.tobytes() == second.image.tobytes()

    def test_empty_seed(self, identicons: IdenticonService) -> None:
        identicon = identicons.create_identicon("", REFERENCE)
        assert identicon.color.as_tuple() == (183, 153, 165)
        assert identicon.image.size == (100, 100)

    def test_different_seeds_differ(self, identicons: IdenticonService) -> None:
        alice = identicons.create_identicon("alice", REFERENCE)
        bob = identicons.create_identicon("bob", REFERENCE)
        assert alice.image.tobytes() != bob.image.tobytes()

    def test_pixels_are_background_or_color(self, identicons: IdenticonService) -> None:
        identicon = identicons.create_identicon("carol", IdenticonParams(257, 7, 11))
        pixels = np.asarray(identicon.image).reshape(-1, 3)
        colors = {tuple(int(v) for v in row) for row in np.unique(pixels, axis=0)}
        assert colors <= {BACKGROUND, identicon.color.as_tuple()}

    def test_image_matches_grid(self, identicons: IdenticonService) -> None:
        identicon = identicons.create_identicon("dave", REFERENCE)
        canvas = np.asarray(identicon.image)
        fill = np.array(identicon.color.as_tuple(), dtype=np.uint8)
        # offset 10, cell 16: sample each cell's center pixel
        for row in range(5):
            for col in range(5):
                pixel = canvas[10 + row * 16 + 8, 10 + col * 16 + 8]
                assert (pixel == fill).all() == identicon.grid.is_filled(row, col)

    def test_exhausted_grid_is_reproducible(self, identicons: IdenticonService) -> None:
        params = IdenticonParams(image_size=300, grid_size=30, padding_percent=0)
        first = identicons.create_identicon("alice", params)
        second = identicons.create_identicon("alice", params)
        assert not first.grid.cells[16:].any()
        assert first.image.tobytes() == second.image.tobytes()

    def test_default_params(self, identicons: IdenticonService) -> None:
        identicon = identicons.create_identicon("alice")
        assert identicon.params == DEFAULT_PARAMS
        assert identicon.image.size == (420, 420)

    def test_bad_geometry_raises(self, identicons: IdenticonService) -> None:
        with pytest.raises(IdenticonConfigError):
            identicons.create_identicon("alice", IdenticonParams(image_size=10, grid_size=15, padding_percent=0))

    def test_stages_are_injectable(self) -> None:
        calls: list[str] = []

        class RecordingDigests:
            def derive_digest(self, seed: str) -> bytes:
                calls.append(seed)
                return bytes([0, 255, 128, 0xFF]) + bytes(28)

        service = IdenticonService(digest_service=RecordingDigests())
        identicon = service.create_identicon("anything", REFERENCE)
        assert calls == ["anything"]
        assert identicon.color.as_tuple() == (50, 200, 125)
        assert identicon.grid.rows()[0] == (True,) * 5
