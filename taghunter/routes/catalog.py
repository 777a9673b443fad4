from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from ..logs import OperationLogContext
from ..services.catalog_svc import list_game_types, list_scenarios

router = APIRouter()


class GameTypeOut(BaseModel):
    id: str
    name: str
    description: str
    created_at: Optional[str] = None


class ScenarioOut(BaseModel):
    id: str
    game_type_id: str
    title: str
    description: str
    difficulty: str
    duration_minutes: int
    created_at: Optional[str] = None
    image_url: Optional[str] = None


@router.get("/api/game-types", response_model=list[GameTypeOut])
def api_game_types():
    log = OperationLogContext("LIST_GAME_TYPES")
    try:
        items = list_game_types()
        log.set_result_count(len(items))
        log.write("OK")
        return items
    except Exception as e:
        log.write("ERROR", str(e))
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/api/scenarios", response_model=list[ScenarioOut])
def api_scenarios(game_type_id: Optional[str] = Query(None)):
    log = OperationLogContext("LIST_SCENARIOS")
    log.set_payload({"game_type_id": game_type_id})
    if game_type_id is not None:
        log.set_entity("GAME_TYPE", game_type_id)
    try:
        items = list_scenarios(game_type_id)
        log.set_result_count(len(items))
        log.write("OK")
        return items
    except Exception as e:
        log.write("ERROR", str(e))
        raise HTTPException(status_code=500, detail=str(e))
