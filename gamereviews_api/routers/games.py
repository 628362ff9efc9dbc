from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.orm import Session
from typing import List
from ..db import get_db
from ..schemas.game import Game as GameSchema, GameDetail
from ..schemas.review import MAX_DB_INT
from ..utils.game import get_game, list_games
from ..utils.projection import build_game_detail

router = APIRouter(prefix="/games", tags=["Games"])


@router.get("", response_model=List[GameSchema])
def get_all_games(db: Session = Depends(get_db)):
    return list_games(db)


@router.get("/{game_id}", response_model=GameDetail)
def get_game_by_id(game_id: int = Path(..., ge=1, le=MAX_DB_INT), db: Session = Depends(get_db)):
    game = get_game(db, game_id)
    if not game:
        raise HTTPException(404, "Game not found")
    return build_game_detail(db, game)
