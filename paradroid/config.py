from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .model import FieldConfig


class AiConfig(BaseModel):
    """Tunables for the decision engine, constructed once per game."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    probability_for_random_tiling: float = Field(
        default=0.1, ge=0.0, le=1.0, alias="probabilityForRandomTiling",
        description="Chance a sweep reset uses a fully random offset instead of a corner translation")
    avoid_field_border_in_radar: bool = Field(
        default=False, alias="avoidFieldBorderInRadar",
        description="Keep one extra ring between radar discs and the field border")
    probability_to_avoid_team: float = Field(
        default=1.0, ge=0.0, le=1.0, alias="probabilityToAvoidTeam",
        description="Chance a crowded bot spaces out from its teammate instead of sweeping")
    persist: bool = Field(
        default=True,
        description="Re-queue sighted positions as sweep tiles")
    random_fire: bool = Field(
        default=True, alias="randomFire",
        description="Jitter fire targets by a small offset")
    evade: bool = Field(
        default=True,
        description="Detection and damage may trigger evasive movement")
    avoid_probability: float = Field(
        default=0.8, ge=0.0, le=1.0, alias="avoidProbability",
        description="Chance a detection/damage event creates a threat record")
    persist_scan_distance: Optional[int] = Field(
        default=None, gt=0, alias="persistScanDistance",
        description="Dedupe radius for solo persist expansion (defaults to radar radius)")
    avoidance_distance: Optional[int] = Field(
        default=None, gt=0, alias="avoidanceDistance",
        description="Radius of the escape waypoint template (defaults to twice the move radius)")
    collision_distance: Optional[int] = Field(
        default=None, gt=0, alias="collisionDistance",
        description="Teammates this close trigger spacing moves (defaults to radar radius)")

    def persist_radius(self, field: FieldConfig) -> int:
        return self.persist_scan_distance or field.radar_radius

    def escape_radius(self, field: FieldConfig) -> int:
        return self.avoidance_distance or 2 * field.move_radius

    def collision_radius(self, field: FieldConfig) -> int:
        return self.collision_distance or field.radar_radius


@dataclass(frozen=True)
class PolicyProfile:
    """Constants that differ between a lone bot and a full team."""
    name: str
    follow_threat_probability: float  # chance a threatened bot evades instead of firing
    fire_jitter: int  # max absolute offset added to one fire axis


SOLO_POLICY = PolicyProfile(name="solo", follow_threat_probability=0.9, fire_jitter=1)
TEAM_POLICY = PolicyProfile(name="team", follow_threat_probability=0.75, fire_jitter=2)
