import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from .config import SOLO_POLICY, TEAM_POLICY, AiConfig, PolicyProfile
from .events import RoundIntel, classify_events, parse_event
from .hexgrid import Coordinate, distance, on_field
from .model import Bot, Decision, Event, FieldConfig
from .movement import MovementPlanner
from .rng import DRNG
from .sweep import SweepScheduler
from .threat import ThreatMemory

log = logging.getLogger(__name__)

# Paradroid
BOT_NAMES: Tuple[str, ...] = (
    "001", "123", "139", "247", "249", "296", "302", "329", "420", "476", "493", "516",
    "571", "614", "615", "629", "711", "742", "751", "821", "834", "883", "999",
)


@dataclass
class EngineContext:
    """Everything the decision engine carries from one round to the next."""
    field_config: FieldConfig
    config: AiConfig
    rng: DRNG
    scheduler: SweepScheduler
    planner: MovementPlanner
    threats: ThreatMemory
    team_name: str = ""
    team_id: Optional[int] = None
    other_teams: List[Dict[str, Any]] = field(default_factory=list)
    rounds_played: int = 0


def _as_bots(bots: Iterable[Any]) -> List[Bot]:
    return [b if isinstance(b, Bot) else Bot.from_dict(b) for b in bots or []]


def _as_events(events: Iterable[Any]) -> List[Event]:
    parsed = []
    for e in events or []:
        if not isinstance(e, Event):
            e = parse_event(e)
        if e is not None:
            parsed.append(e)
    return parsed


def update_threats(ctx: EngineContext, intel: RoundIntel, alive: Sequence[Bot]) -> Dict[str, Coordinate]:
    """Enter new threat records and return the waypoints active this round."""
    alive_ids = {b.id for b in alive}
    for bot_id in list(ctx.threats.threats):
        if bot_id not in alive_ids:
            ctx.threats.forget(bot_id)
    if ctx.config.evade:
        for bot_id, pos in intel.newly_threatened.items():
            if ctx.rng.bernoulli(ctx.config.avoid_probability):
                ctx.threats.enter(bot_id, ctx.planner.escape_waypoint(pos))
    return ctx.threats.advance()


def select_scanner(ctx: EngineContext, alive: Sequence[Bot], threatened: Dict[str, Coordinate]) -> Optional[str]:
    """Pick the bot that sweeps this round; lone bots have no fixed scanner."""
    if len(alive) <= 1:
        return None
    calm = [b for b in alive if b.id not in threatened]
    if calm:
        return calm[-1].id
    return ctx.rng.choice(alive).id


def jitter_target(ctx: EngineContext, target: Coordinate, policy: PolicyProfile) -> Coordinate:
    """Nudge one axis of the target, falling back to the exact target off-field."""
    if not ctx.config.random_fire or policy.fire_jitter <= 0:
        return target
    offset = ctx.rng.next_int(1, policy.fire_jitter) * ctx.rng.choice((-1, 1))
    if ctx.rng.next_int(0, 1) == 0:
        moved = Coordinate(target.x + offset, target.y)
    else:
        moved = Coordinate(target.x, target.y + offset)
    if not on_field(moved, ctx.field_config.field_radius):
        return target
    return moved


def nearest_crowding_teammate(ctx: EngineContext, bot: Bot, alive: Sequence[Bot]) -> Optional[Bot]:
    limit = ctx.config.collision_radius(ctx.field_config)
    nearest = None
    min_dist = None
    for other in alive:
        if other.id == bot.id:
            continue
        dist = distance(bot.pos, other.pos)
        if dist > limit:
            continue
        if min_dist is None or dist < min_dist:
            nearest = other
            min_dist = dist
    return nearest


def decide_bot(ctx: EngineContext, bot: Bot, alive: Sequence[Bot], scanner: Optional[str],
               threatened: Dict[str, Coordinate], fire_target: Optional[Coordinate],
               policy: PolicyProfile) -> Decision:
    """Walk the priority list for one bot and return its single action."""
    if bot.id == scanner:
        return Decision(bot.id, "scan", ctx.scheduler.next())

    waypoint = threatened.get(bot.id)
    # Only a fire target can pull a threatened bot away from evading
    if waypoint is not None and (fire_target is None
                                 or ctx.rng.bernoulli(policy.follow_threat_probability)):
        return Decision(bot.id, "move", ctx.planner.approach(bot.pos, waypoint))

    if fire_target is not None:
        return Decision(bot.id, "fire", jitter_target(ctx, fire_target, policy))

    crowding = nearest_crowding_teammate(ctx, bot, alive)
    if crowding is not None and ctx.rng.bernoulli(ctx.config.probability_to_avoid_team):
        return Decision(bot.id, "move", ctx.planner.avoid(bot.pos, crowding.pos))

    return Decision(bot.id, "scan", ctx.scheduler.next())


class DecisionEngine:
    """Per-round decision maker for one team of bots."""

    def __init__(self, seed: Optional[int] = None, ai_config: Optional[AiConfig] = None,
                 solo_policy: PolicyProfile = SOLO_POLICY, team_policy: PolicyProfile = TEAM_POLICY):
        self.seed = seed
        self.ai_config = ai_config or AiConfig()
        self.solo_policy = solo_policy
        self.team_policy = team_policy
        self.context: Optional[EngineContext] = None
        self.bots: List[Bot] = []

    @property
    def bot_names(self) -> Tuple[str, ...]:
        return BOT_NAMES

    def initialize(self, startup_config: Dict[str, Any], bots: Iterable[Any]) -> EngineContext:
        """Set up geometry, templates and the first tiling for a new game."""
        field_cfg = FieldConfig.from_dict(startup_config.get("config") or {})
        you = startup_config.get("you") or {}
        rng = DRNG(self.seed)
        self.context = EngineContext(
            field_config=field_cfg,
            config=self.ai_config,
            rng=rng,
            scheduler=SweepScheduler(field_cfg, self.ai_config, rng),
            planner=MovementPlanner(field_cfg, rng, self.ai_config.escape_radius(field_cfg)),
            threats=ThreatMemory(),
            team_name=you.get("name", ""),
            team_id=you.get("teamId"),
            other_teams=list(startup_config.get("otherTeams") or []),
        )
        self.context.scheduler.reset()
        self.bots = _as_bots(bots)
        log.info("Team %s ready: field=%d radar=%d move=%d, %d bots",
                 self.context.team_name, field_cfg.field_radius, field_cfg.radar_radius,
                 field_cfg.move_radius, len(self.bots))
        return self.context

    def decide(self, round_id: int, events: Iterable[Any], bots: Optional[Iterable[Any]] = None,
               config: Optional[Dict[str, Any]] = None) -> List[Decision]:
        """Return exactly one decision per living bot for this round."""
        ctx = self.context
        if ctx is None:
            raise RuntimeError("decide() called before initialize()")
        if config:
            log.debug("Round %s config %s", round_id, config)
        if bots is not None:
            self.bots = _as_bots(bots)
        alive = [b for b in self.bots if b.alive]
        ctx.rounds_played += 1

        intel = classify_events(_as_events(events), alive, ctx.config)
        for pos in intel.persist_candidates:
            ctx.scheduler.persist(pos, len(alive))

        threatened = update_threats(ctx, intel, alive)
        if not alive:
            return []

        policy = self.solo_policy if len(alive) == 1 else self.team_policy
        scanner = select_scanner(ctx, alive, threatened)
        fire_target = ctx.rng.choice(intel.fire_candidates) if intel.fire_candidates else None

        decisions = []
        for bot in alive:
            decision = decide_bot(ctx, bot, alive, scanner, threatened, fire_target, policy)
            log.debug("Round %s: bot %s %s at %s", round_id, bot.id, decision.kind, decision.pos)
            decisions.append(decision)
        return decisions
