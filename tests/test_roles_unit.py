"""
Unit tests for role assignment.

Tests the fallback chains for primary, secondary, accent, background
and text roles.
"""

import pytest

from ziekie_palette.services.colors.color import Color, WHITE, BLACK
from ziekie_palette.services.colors.quantize import Candidate
from ziekie_palette.services.colors.palette import (
    DEFAULT_PALETTE, DEFAULT_SWATCHES, SYSTEM_BLUE, SYSTEM_MINT, SYSTEM_PURPLE
)
from ziekie_palette.services.colors.roles import (
    select_primary, select_secondary, select_accent,
    select_background, select_text, assign_roles
)
from ziekie_palette.services.colors.uniqueness import build_color_pool


RED = Color(1.0, 0.0, 0.0)
NAVY = Color(0.05, 0.05, 0.2)
GRAY = Color(0.5, 0.5, 0.5)


def candidates_for(*colors):
    return [Candidate(color=c, count=1, first_seen=i) for i, c in enumerate(colors)]


class TestSelectPrimary:
    """Test primary selection"""

    def test_prefers_vibrant_midtone(self):
        """Dark colors are skipped in favour of vibrant mid-brightness ones"""
        assert select_primary([NAVY, RED]) == 1

    def test_falls_back_to_first(self):
        """Without a qualifying color the first pool entry is used"""
        assert select_primary([NAVY, GRAY]) == 0

    def test_empty_pool(self):
        """Empty pool has no primary"""
        assert select_primary([]) == -1


class TestSelectSecondary:
    """Test secondary selection"""

    def test_skips_taken_and_close_colors(self):
        """Secondary must be untaken and more than 0.3 from primary"""
        close = Color(0.9, 0.1, 0.1)
        pool = [RED, close, NAVY]
        assert select_secondary(pool, RED, [0]) == 2

    def test_none_when_all_close(self):
        """No distant candidate resolves to None"""
        assert select_secondary([RED, Color(0.9, 0.1, 0.0)], RED, [0]) is None


class TestSelectAccent:
    """Test accent selection"""

    def test_requires_saturated_bright_distinct(self):
        """Accent must be saturated, bright and distant from both roles"""
        dull = Color(0.5, 0.45, 0.45)
        dark = Color(0.5, 0.0, 0.1)
        mint = SYSTEM_MINT
        pool = [RED, NAVY, dull, dark, mint]
        assert select_accent(pool, [RED, NAVY], [0, 1]) == 4

    def test_none_without_candidates(self):
        """No qualifying candidate resolves to None"""
        assert select_accent([RED, NAVY], [RED, NAVY], [0, 1]) is None


class TestBackgroundAndText:
    """Test background search and text contrast"""

    def test_lightest_candidate_used_when_light_enough(self):
        """A candidate brighter than 0.85 becomes the background"""
        light = Color(0.9, 0.88, 0.86)
        assert select_background(candidates_for(RED, light, Color(0.87, 0.87, 0.87))) == light

    def test_white_when_nothing_light(self):
        """Without a light candidate the background is white"""
        assert select_background(candidates_for(RED, GRAY)) == WHITE
        assert select_background([]) == WHITE

    def test_first_of_equally_light_wins(self):
        """Ties keep the first candidate"""
        a = Color(0.9, 0.9, 0.9, 1.0)
        b = Color(0.9, 0.9, 0.9, 0.5)
        assert select_background(candidates_for(a, b)).alpha == 1.0

    @pytest.mark.parametrize("background,expected", [
        (WHITE, BLACK),
        (Color(0.61, 0.61, 0.61), BLACK),
        (Color(0.55, 0.55, 0.55), WHITE),
        (Color(0.2, 0.2, 0.2), WHITE),
        (BLACK, WHITE),
    ])
    def test_text_is_black_or_white(self, background, expected):
        """Text is black on backgrounds brighter than 0.6, else white"""
        assert select_text(background) == expected


class TestAssignRoles:
    """Test complete role assignment and fallbacks"""

    def test_padded_empty_pool_is_default_palette(self):
        """Swatch padding alone reproduces the default palette"""
        pool = build_color_pool([])
        assert assign_roles(pool, []) == DEFAULT_PALETTE

    def test_single_color_uses_complement(self):
        """Secondary falls back to the hue complement of primary"""
        palette = assign_roles([RED], candidates_for(RED))

        assert palette.primary == RED
        assert palette.secondary == Color(0.0, 1.0, 1.0)
        assert palette.accent == SYSTEM_PURPLE
        assert palette.background == WHITE
        assert palette.text == BLACK

    def test_gray_primary_falls_back_to_mint(self):
        """Achromatic primaries have no complement"""
        palette = assign_roles([GRAY], candidates_for(GRAY))
        assert palette.primary == GRAY
        assert palette.secondary == SYSTEM_MINT

    def test_empty_pool_uses_role_defaults(self):
        """Assignment is total even without any pool colors"""
        palette = assign_roles([], [])
        assert palette.primary == SYSTEM_BLUE
        assert palette.secondary == SYSTEM_BLUE.complementary()
        assert palette.accent == SYSTEM_PURPLE
        assert palette.background == WHITE
        assert palette.text == BLACK

    def test_roles_come_from_pool_in_rank_order(self):
        """A single found color is padded from swatch one onwards, then assigned"""
        pool = build_color_pool(candidates_for(RED))
        assert pool == [RED] + list(DEFAULT_SWATCHES[1:8])
        palette = assign_roles(pool, candidates_for(RED))

        assert palette.primary == RED
        assert palette.secondary == SYSTEM_MINT
        assert palette.accent == SYSTEM_PURPLE

    def test_background_searches_full_candidate_set(self):
        """A light color outside the pool can still be the background"""
        light = Color(0.92, 0.9, 0.9)
        palette = assign_roles([RED], candidates_for(RED, light))
        assert palette.background == light
        assert palette.text == BLACK
