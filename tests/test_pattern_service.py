"""Tests for color banding, the bit cursor and the mirrored grid."""

from __future__ import annotations

import pytest

from identigen.config import BRIGHTNESS, IdenticonConfigError
from identigen.services.digest_service import DigestService
from identigen.services.pattern_service import BitCursor, PatternService, half_width

T, F = True, False


class TestBitCursor:
    def test_starts_after_color_bytes(self) -> None:
        assert BitCursor.start() == BitCursor(byte_index=3, bit_index=0)

    def test_advance_within_byte(self) -> None:
        assert BitCursor(3, 0).advance() == BitCursor(3, 1)
        assert BitCursor(3, 6).advance() == BitCursor(3, 7)

    def test_advance_rolls_over_to_next_byte(self) -> None:
        assert BitCursor(3, 7).advance() == BitCursor(4, 0)

    def test_read_is_lsb_first(self) -> None:
        digest = bytes([0, 0, 0, 0b0000_0101])
        bits = []
        cursor = BitCursor.start()
        while not cursor.exhausted(digest):
            bits.append(cursor.read(digest))
            cursor = cursor.advance()
        assert bits == [1, 0, 1, 0, 0, 0, 0, 0]

    def test_exhausted(self) -> None:
        digest = bytes(4)
        assert not BitCursor(3, 7).exhausted(digest)
        assert BitCursor(4, 0).exhausted(digest)


class TestDeriveColor:
    def test_alice_color(self, patterns: PatternService, alice_digest: bytes) -> None:
        # 0x2b, 0xd8, 0x06
        assert patterns.derive_color(alice_digest).as_tuple() == (75, 177, 53)

    def test_empty_seed_color(self, patterns: PatternService, empty_digest: bytes) -> None:
        # 0xe3, 0xb0, 0xc4
        assert patterns.derive_color(empty_digest).as_tuple() == (183, 153, 165)

    def test_band_edges(self, patterns: PatternService) -> None:
        assert patterns.derive_color(bytes([0, 255, 128])).as_tuple() == (50, 200, 125)

    def test_integer_truncation(self, patterns: PatternService) -> None:
        # 1 * 150 / 255 = 0.58 -> 0, 254 * 150 / 255 = 149.4 -> 149
        assert patterns.derive_color(bytes([1, 254, 2])).as_tuple() == (50, 199, 51)

    def test_custom_band(self, patterns: PatternService) -> None:
        color = patterns.derive_color(bytes([255, 0, 255]), min_brightness=10, max_brightness=20)
        assert color.as_tuple() == (20, 10, 20)

    def test_channels_within_band(self, patterns: PatternService) -> None:
        digests = DigestService()
        for i in range(200):
            color = patterns.derive_color(digests.derive_digest(f"user-{i}"))
            for channel in color.as_tuple():
                assert BRIGHTNESS.min <= channel <= BRIGHTNESS.max

    def test_hex(self, patterns: PatternService, alice_digest: bytes) -> None:
        assert patterns.derive_color(alice_digest).hex == "#4BB135"

    @pytest.mark.parametrize("band", [(200, 50), (-1, 100), (0, 256)])
    def test_invalid_band_rejected(self, patterns: PatternService, band: tuple) -> None:
        with pytest.raises(IdenticonConfigError):
            patterns.derive_color(bytes(3), *band)

    @pytest.mark.parametrize("length", [0, 1, 2])
    def test_short_digest_rejected(self, patterns: PatternService, length: int) -> None:
        with pytest.raises(IdenticonConfigError, match="3"):
            patterns.derive_color(bytes(length))

    def test_exactly_three_bytes(self, patterns: PatternService) -> None:
        assert patterns.derive_color(bytes(3)).as_tuple() == (50, 50, 50)


class TestDeriveGrid:
    def test_alice_grid(self, patterns: PatternService, alice_digest: bytes) -> None:
        grid = patterns.derive_grid(alice_digest, 5)
        assert grid.rows() == (
            (T, F, F, F, T),
            (T, F, F, F, T),
            (T, T, T, T, T),
            (T, T, T, T, T),
            (T, T, T, T, T),
        )

    def test_empty_seed_grid(self, patterns: PatternService, empty_digest: bytes) -> None:
        grid = patterns.derive_grid(empty_digest, 5)
        assert grid.rows() == (
            (F, T, F, T, F),
            (F, F, F, F, F),
            (T, F, F, F, T),
            (F, F, T, F, F),
            (T, F, F, F, T),
        )

    @pytest.mark.parametrize("grid_size", [1, 2, 3, 4, 5, 6, 7, 10, 15, 21])
    def test_mirror_symmetry(self, patterns: PatternService, grid_size: int) -> None:
        digests = DigestService()
        for seed in ("alice", "", "bob", "x" * 100):
            cells = patterns.derive_grid(digests.derive_digest(seed), grid_size).cells
            assert cells.shape == (grid_size, grid_size)
            for row in range(grid_size):
                for col in range(grid_size):
                    assert cells[row, col] == cells[row, grid_size - 1 - col]

    def test_even_grid_consumes_half_columns(self, patterns: PatternService) -> None:
        # 4 columns -> 2 bits per row: 0b10_01_11_00 read LSB first
        grid = patterns.derive_grid(bytes([0, 0, 0, 0b1001_1100]), 4)
        assert grid.rows()[:4] == (
            (F, F, F, F),
            (T, T, T, T),
            (T, F, F, T),
            (F, T, T, F),
        )

    def test_deterministic(self, patterns: PatternService, alice_digest: bytes) -> None:
        first = patterns.derive_grid(alice_digest, 9)
        second = patterns.derive_grid(alice_digest, 9)
        assert first.rows() == second.rows()

    def test_short_digest_leaves_cells_empty(self, patterns: PatternService) -> None:
        # one pattern byte = 8 bits: rows 0-1 (3 bits each) and two cells of row 2
        grid = patterns.derive_grid(bytes([0, 0, 0, 0xFF]), 5)
        assert grid.rows() == (
            (T, T, T, T, T),
            (T, T, T, T, T),
            (T, T, F, T, T),
            (F, F, F, F, F),
            (F, F, F, F, F),
        )

    def test_large_grid_exhausts_digest(self, patterns: PatternService, alice_digest: bytes) -> None:
        # 29 pattern bytes = 232 bits; 15 bits per row -> 15 full rows, 7 bits of row 15
        grid = patterns.derive_grid(alice_digest, 30)
        cells = grid.cells
        assert not cells[16:].any()
        assert not cells[15, 7:23].any()
        assert cells[:15].any()

        again = patterns.derive_grid(alice_digest, 30)
        assert grid.rows() == again.rows()

    def test_grid_15_fits_in_digest(self, patterns: PatternService) -> None:
        assert patterns.usable_rows(32, 15) >= 15

    def test_usable_rows(self, patterns: PatternService) -> None:
        assert patterns.usable_rows(32, 5) == 232 // 3
        assert patterns.usable_rows(32, 30) == 15
        assert patterns.usable_rows(3, 5) == 0

    def test_zero_grid_rejected(self, patterns: PatternService, alice_digest: bytes) -> None:
        with pytest.raises(IdenticonConfigError):
            patterns.derive_grid(alice_digest, 0)


def test_half_width() -> None:
    assert [half_width(g) for g in (1, 2, 3, 4, 5, 15)] == [1, 1, 2, 2, 3, 8]
