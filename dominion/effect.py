from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from dominion.building import BuildingKey


class EffectType(Enum):
    BUILDING_MULT = auto()
    GLOBAL_MULT = auto()
    CLICK_MULT = auto()


@dataclass(frozen=True)
class EffectDef:
    """A single multiplicative modifier granted by a purchased upgrade.

    ``target`` is only meaningful for BUILDING_MULT. GLOBAL_MULT applies to
    every building and CLICK_MULT to the manual click yield.
    """

    type: EffectType
    value: float
    target: BuildingKey | None = None


class Effect:
    """Convenience constructors for the supported effect kinds."""

    @staticmethod
    def building(key: BuildingKey, factor: float) -> EffectDef:
        return EffectDef(type=EffectType.BUILDING_MULT, value=factor, target=key)

    @staticmethod
    def all_buildings(factor: float) -> EffectDef:
        return EffectDef(type=EffectType.GLOBAL_MULT, value=factor)

    @staticmethod
    def click(factor: float) -> EffectDef:
        return EffectDef(type=EffectType.CLICK_MULT, value=factor)
