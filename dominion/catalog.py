"""The built-in Cthulhu's Dominion catalog."""
from __future__ import annotations

from dominion.building import BuildingDef, BuildingKey
from dominion.cost_scaling import CostScaling
from dominion.definition import GameConfig, GameDefinition
from dominion.effect import Effect
from dominion.upgrade import UpgradeDef


def _building(
    key: BuildingKey,
    name: str,
    description: str,
    base_cost: int,
    base_production: float,
) -> BuildingDef:
    return BuildingDef(
        key=key,
        display_name=name,
        description=description,
        base_cost=base_cost,
        base_production=base_production,
        cost_scaling=CostScaling.exponential(1.15),
    )


def define_game(config: GameConfig | None = None) -> GameDefinition:
    return GameDefinition(
        config=config or GameConfig(name="Cthulhu's Dominion"),
        buildings=[
            _building(BuildingKey.CURSOR, "Cultist", "Whispers eldritch secrets", 15, 0.1),
            _building(BuildingKey.GRANDMA, "Elder One", "Ancient being from beyond", 100, 1.0),
            _building(BuildingKey.FARM, "Ritual Site", "Conducts forbidden ceremonies", 1100, 8.0),
            _building(
                BuildingKey.MINE,
                "Deep One Colony",
                "Underwater servants of Cthulhu",
                12000,
                47.0,
            ),
            _building(
                BuildingKey.TEMPLE,
                "Temple of Dagon",
                "Ancient place of worship",
                130000,
                260.0,
            ),
            _building(
                BuildingKey.PORTAL,
                "Dimensional Portal",
                "Gateway to R'lyeh",
                1400000,
                1400.0,
            ),
        ],
        upgrades=[
            UpgradeDef(
                id="necronomicon_pages",
                display_name="Necronomicon Pages",
                description="Cultists are twice as efficient",
                cost=100,
                effects=[Effect.building(BuildingKey.CURSOR, 2.0)],
            ),
            UpgradeDef(
                id="eldritch_incantation",
                display_name="Eldritch Incantation",
                description="Your influence is twice as powerful",
                cost=500,
                effects=[Effect.click(2.0)],
            ),
            UpgradeDef(
                id="ancient_artifacts",
                display_name="Ancient Artifacts",
                description="Elder Ones are twice as efficient",
                cost=1000,
                effects=[Effect.building(BuildingKey.GRANDMA, 2.0)],
            ),
            UpgradeDef(
                id="blood_sacrifice",
                display_name="Blood Sacrifice",
                description="Ritual Sites are twice as efficient",
                cost=11000,
                effects=[Effect.building(BuildingKey.FARM, 2.0)],
            ),
            UpgradeDef(
                id="esoteric_geometry",
                display_name="Esoteric Geometry",
                description="Deep One Colonies are twice as efficient",
                cost=120000,
                effects=[Effect.building(BuildingKey.MINE, 2.0)],
            ),
            UpgradeDef(
                id="non_euclidean_architecture",
                display_name="Non-Euclidean Architecture",
                description="Temples of Dagon are twice as efficient",
                cost=1300000,
                effects=[Effect.building(BuildingKey.TEMPLE, 2.0)],
            ),
            UpgradeDef(
                id="the_stars_are_right",
                display_name="The Stars Are Right",
                description="All minions are twice as efficient",
                cost=10000000,
                effects=[Effect.all_buildings(2.0), Effect.click(5.0)],
            ),
        ],
    )
