"""Milestone bands keyed by lifetime currency."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from dominion.state import GameState

T = TypeVar("T")


@dataclass(frozen=True)
class Band(Generic[T]):
    """A value that applies from ``lower_bound`` up to the next band."""

    lower_bound: int
    value: T


CLICK_POWER_BANDS: tuple[Band[int], ...] = (
    Band(0, 1),
    Band(1_000, 2),
    Band(10_000, 5),
    Band(100_000, 10),
    Band(1_000_000, 25),
    Band(10_000_000, 50),
    Band(100_000_000, 100),
)

DOMINATION_BANDS: tuple[Band[str], ...] = (
    Band(0, "Local Cult (Town)"),
    Band(1_000, "Regional Influence (County)"),
    Band(10_000, "National Presence (Country)"),
    Band(100_000, "Continental Power (Continent)"),
    Band(1_000_000, "Global Reach (Earth)"),
    Band(10_000_000, "Cosmic Influence (Solar System)"),
    Band(100_000_000, "Galactic Dominion (Galaxy)"),
    Band(1_000_000_000, "Universal Awakening (Cthulhu Rises!)"),
)


def _band_index(bands: tuple[Band[T], ...], lifetime_points: int) -> int:
    index = 0
    for i, band in enumerate(bands):
        if lifetime_points >= band.lower_bound:
            index = i
    return index


def click_power_tier(lifetime_points: int) -> int:
    return CLICK_POWER_BANDS[_band_index(CLICK_POWER_BANDS, lifetime_points)].value


def domination_tier(lifetime_points: int) -> str:
    return DOMINATION_BANDS[_band_index(DOMINATION_BANDS, lifetime_points)].value


def next_click_power_milestone(lifetime_points: int) -> Band[int] | None:
    """The next band to be reached, or None once the top band is active."""
    index = _band_index(CLICK_POWER_BANDS, lifetime_points)
    if index + 1 < len(CLICK_POWER_BANDS):
        return CLICK_POWER_BANDS[index + 1]
    return None


def apply_click_power_progression(state: GameState) -> bool:
    """Raise click power to the current band's value. Never lowers it.

    Safe to call redundantly. Returns True if click power changed.
    """
    tier = click_power_tier(state.lifetime_points)
    if tier > state.click_power:
        state.click_power = tier
        return True
    return False
