from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

class Position(BaseModel):
    x: int
    y: int

class BotIn(BaseModel):
    """Bot as reported by the game server."""
    model_config = ConfigDict(populate_by_name=True)

    bot_id: str = Field(alias="botId")
    x: int
    y: int
    alive: bool = True
    hp: Optional[int] = None

class TeamIn(BaseModel):
    name: str
    team_id: Optional[int] = Field(default=None, alias="teamId")

class StartRequest(BaseModel):
    """Game start request schema."""
    model_config = ConfigDict(populate_by_name=True)

    you: TeamIn
    game_config: Dict[str, Any] = Field(alias="config")
    other_teams: List[Dict[str, Any]] = Field(default_factory=list, alias="otherTeams")
    bots: List[BotIn] = Field(default_factory=list)
    seed: Optional[int] = None
    ai: Dict[str, Any] = Field(default_factory=dict)

class RoundRequest(BaseModel):
    """Round request schema; events stay raw so unknown tags pass through."""
    model_config = ConfigDict(populate_by_name=True)

    round_id: int = Field(alias="roundId")
    events: List[Any] = Field(default_factory=list)
    bots: List[BotIn]
    game_config: Optional[Dict[str, Any]] = Field(default=None, alias="config")

class ActionOut(BaseModel):
    bot_id: str = Field(serialization_alias="botId")
    action: Literal["scan", "move", "fire"]
    x: int
    y: int

class RoundResponse(BaseModel):
    actions: List[ActionOut]

class LogResponse(BaseModel):
    """Round log response schema."""
    next_offset: int
    rounds: list[dict]
