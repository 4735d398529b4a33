from __future__ import annotations

from dominion.building import BuildingKey
from dominion.effect import EffectDef, EffectType


class ProductionPipeline:
    """Folds resolved upgrade effects into production and click multipliers.

    Multipliers are recomputed from the purchased set on every call and never
    cached, so buying an upgrade takes effect on the very next query.
    """

    def global_multiplier(self, effects: list[EffectDef]) -> float:
        mult = 1.0
        for eff in effects:
            if eff.type is EffectType.GLOBAL_MULT:
                mult *= eff.value
        return mult

    def building_multiplier(
        self, key: BuildingKey, effects: list[EffectDef], global_mult: float = 1.0
    ) -> float:
        mult = global_mult
        for eff in effects:
            if eff.type is EffectType.BUILDING_MULT and eff.target is key:
                mult *= eff.value
        return mult

    def compute_rate(
        self,
        production: dict[BuildingKey, float],
        effects: list[EffectDef],
    ) -> float:
        """Sum per-building production after applying multipliers.

        production maps each building to its unscaled total (base * count).
        """
        global_mult = self.global_multiplier(effects)
        total = 0.0
        for key, amount in production.items():
            total += amount * self.building_multiplier(key, effects, global_mult)
        return total

    def compute_click_value(self, base_value: int, effects: list[EffectDef]) -> float:
        click_mult = 1.0
        for eff in effects:
            if eff.type is EffectType.CLICK_MULT:
                click_mult *= eff.value
        return base_value * click_mult
