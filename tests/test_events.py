"""Test event parsing and classification."""
from paradroid.config import AiConfig
from paradroid.events import classify_events, parse_event, parse_events
from paradroid.hexgrid import Coordinate
from paradroid.model import Bot, EventKind

BOTS = [Bot("a", Coordinate(0, 0)), Bot("b", Coordinate(3, -1)), Bot("c", Coordinate(1, 1), alive=False)]


def test_parse_position_and_bot_events():
    see = parse_event({"event": "see", "pos": {"x": 2, "y": -1}})
    assert see.kind is EventKind.SEE
    assert see.pos == Coordinate(2, -1)
    damaged = parse_event({"event": "damaged", "botId": 7})
    assert damaged.kind is EventKind.DAMAGED
    assert damaged.bot_id == "7"
    noaction = parse_event({"event": "noaction", "data": {"round": 3}})
    assert noaction.kind is EventKind.NOACTION
    assert noaction.data == {"round": 3}


def test_malformed_and_unknown_events_are_dropped():
    assert parse_event({"event": "teleport", "botId": "a"}) is None
    assert parse_event({"event": "radarEcho"}) is None
    assert parse_event({"event": "see", "pos": {"x": "left"}}) is None
    assert parse_event({"event": "detected"}) is None
    assert parse_event("hit") is None
    assert len(parse_events([{"event": "hit", "botId": "a"}, None, {}])) == 1


def test_classify_round():
    events = parse_events([
        {"event": "hit", "botId": "a"},
        {"event": "radarEcho", "pos": {"x": 4, "y": 0}},
        {"event": "see", "pos": {"x": -2, "y": 1}},
        {"event": "see", "pos": {"x": 4, "y": 0}},
        {"event": "detected", "botId": "a"},
        {"event": "damaged", "botId": "c"},
        {"event": "damaged", "botId": "zz"},
        {"event": "noaction", "botId": "b"},
    ])
    intel = classify_events(events, BOTS, AiConfig())
    assert intel.fire_candidates == [Coordinate(4, 0), Coordinate(-2, 1)]
    assert intel.persist_candidates == intel.fire_candidates
    assert intel.newly_threatened == {"a": Coordinate(0, 0)}
    assert intel.hits == 1
    assert intel.no_actions == 1


def test_persist_flag_gates_persist_candidates():
    events = parse_events([{"event": "see", "pos": {"x": 1, "y": 0}}])
    intel = classify_events(events, BOTS, AiConfig(persist=False))
    assert intel.fire_candidates == [Coordinate(1, 0)]
    assert intel.persist_candidates == []
