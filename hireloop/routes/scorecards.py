# -*- coding: utf-8 -*-
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from hireloop.core.serialization import dump_json
from hireloop.db.database import get_db
from hireloop.db.models import Scorecard
from hireloop.db.serializers import scorecard_to_dict
from hireloop.schemas import ScorecardCreate

logger = logging.getLogger("hireloop.scorecards")

router = APIRouter(prefix="/api/scorecards", tags=["scorecards"])


@router.get("", summary="List all scorecards")
def list_scorecards(db: Session = Depends(get_db)):
    try:
        rows = db.query(Scorecard).order_by(Scorecard.created_at.desc()).all()
        return [scorecard_to_dict(s) for s in rows]
    except Exception as e:
        logger.exception(f"Error fetching scorecards: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch scorecards")


@router.get("/{candidate_id}", summary="List a candidate's scorecards")
def candidate_scorecards(candidate_id: str, db: Session = Depends(get_db)):
    try:
        rows = (
            db.query(Scorecard)
            .filter(Scorecard.candidate_id == candidate_id)
            .order_by(Scorecard.created_at.desc())
            .all()
        )
        return [scorecard_to_dict(s) for s in rows]
    except Exception as e:
        logger.exception(f"Error fetching scorecards: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch scorecards")


@router.post("", summary="Submit an interview scorecard")
def create_scorecard(req: ScorecardCreate, db: Session = Depends(get_db)):
    """
    Scorecards are append-only: there is no update or delete endpoint.
    """
    try:
        scorecard = Scorecard(
            candidate_id=req.candidate_id,
            job_id=req.job_id,
            interviewer_id=req.interviewer_id,
            stage=req.stage,
            scores=dump_json(req.scores or {}),
            feedback=req.feedback,
        )
        db.add(scorecard)
        db.commit()
        return {
            "id": scorecard.id,
            "candidateId": req.candidate_id,
            "jobId": req.job_id,
            "stage": req.stage,
            "scores": req.scores or {},
            "feedback": req.feedback,
        }
    except Exception as e:
        db.rollback()
        logger.exception(f"Error creating scorecard: {e}")
        raise HTTPException(status_code=500, detail="Failed to create scorecard")
