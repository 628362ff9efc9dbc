from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from ..db import get_db
from ..schemas.review import Review as ReviewSchema, ReviewCreate, ReviewUpdate, MAX_DB_INT
from ..utils.request_body import form_or_json
from ..utils.review import (
    create_review,
    update_review,
    delete_review,
    ReferenceNotFoundError,
)

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.post("", response_model=ReviewSchema, status_code=201)
def add_review(
        review: ReviewCreate = Depends(form_or_json(ReviewCreate)),
        db: Session = Depends(get_db),
):
    try:
        return create_review(
            db,
            score=review.score,
            comment=review.comment,
            game_id=review.game_id,
            user_id=review.user_id,
        )
    except ReferenceNotFoundError as e:
        raise HTTPException(422, str(e))
    except IntegrityError as e:
        raise HTTPException(409, "Review conflicts with existing data") from e


@router.patch("/{review_id}", response_model=ReviewSchema)
def edit_review(
        review_id: int = Path(..., ge=1, le=MAX_DB_INT),
        review: ReviewUpdate = Depends(form_or_json(ReviewUpdate)),
        db: Session = Depends(get_db),
):
    updated = update_review(db, review_id, score=review.score, comment=review.comment)
    if not updated:
        raise HTTPException(404, "Review not found")
    return updated


@router.delete("/{review_id}", response_model=ReviewSchema)
def remove_review(review_id: int = Path(..., ge=1, le=MAX_DB_INT), db: Session = Depends(get_db)):
    deleted = delete_review(db, review_id)
    if not deleted:
        raise HTTPException(404, "Review not found")
    return deleted
