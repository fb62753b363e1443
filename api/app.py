import logging
from fastapi import FastAPI, HTTPException
from pydantic import ValidationError
from paradroid.config import AiConfig
from paradroid.engine import BOT_NAMES, DecisionEngine
from paradroid.model import Bot
from paradroid.hexgrid import Coordinate
from runtime.runner import CollectingActuator, RoundRunner
from .schemas import ActionOut, BotIn, LogResponse, RoundRequest, RoundResponse, StartRequest

log = logging.getLogger(__name__)

app = FastAPI(title="Paradroid Decision API")
runner: RoundRunner | None = None
actuator = CollectingActuator()

def _to_bot(b: BotIn) -> Bot:
    return Bot(id=b.bot_id, pos=Coordinate(b.x, b.y), alive=b.alive, hp=b.hp)

@app.get("/")
async def root():
    """API root endpoint."""
    return {
        "message": "Paradroid Decision API",
        "docs": "/docs",
        "version": "1.0"
    }

@app.get("/bots")
async def bot_names():
    """Fixed bot names used to register the team."""
    return {"bots": list(BOT_NAMES)}

@app.post("/game/start")
async def start_game(req: StartRequest):
    """Start a new game with the server's startup message."""
    global runner
    try:
        ai_config = AiConfig.model_validate(req.ai)
        engine = DecisionEngine(seed=req.seed, ai_config=ai_config)
        new_runner = RoundRunner(engine, actuator)
        await new_runner.start(
            {"you": {"name": req.you.name, "teamId": req.you.team_id},
             "config": req.game_config,
             "otherTeams": req.other_teams},
            [_to_bot(b) for b in req.bots],
        )
    except (ValueError, ValidationError) as e:
        raise HTTPException(422, str(e))
    runner = new_runner
    actuator.drain()
    log.info("Game started for team %s with %d bots", req.you.name, len(req.bots))
    return {"team": req.you.name, "bots": [b.bot_id for b in req.bots]}

@app.post("/game/round", response_model=RoundResponse, response_model_by_alias=True)
async def play_round(req: RoundRequest):
    """Decide one round and return one action per living bot."""
    if not runner or not runner.started:
        raise HTTPException(400, "Game not started")
    await runner.play_round(req.round_id, req.events, [_to_bot(b) for b in req.bots], req.game_config)
    return RoundResponse(actions=[
        ActionOut(bot_id=bot_id, action=kind, x=x, y=y)
        for kind, bot_id, x, y in actuator.drain()
    ])

@app.get("/game/log")
async def get_log(since: int = 0, limit: int = 500):
    """Get decided rounds since offset."""
    if not runner:
        raise HTTPException(400, "Game not started")
    records, next_offset = runner.events.since(since, limit)
    return LogResponse(
        next_offset=next_offset,
        rounds=[{
            "round_id": r.round_id,
            "events": [e.kind.value for e in r.events],
            "actions": [d.as_dict() for d in r.decisions],
        } for r in records]
    )
