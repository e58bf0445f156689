# -*- coding: utf-8 -*-
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from hireloop.db.database import get_db
from hireloop.db.models import Evaluation, Interview
from hireloop.db.serializers import row_to_dict
from hireloop.schemas import EvaluationCreate, InterviewCreate, InterviewUpdate

logger = logging.getLogger("hireloop.interviews")

router = APIRouter(prefix="/api/interviews", tags=["interviews"])

NOT_NULL_FIELDS = ("start_time", "end_time", "status")


def _get_interview(db: Session, interview_id: str) -> Interview:
    interview = db.get(Interview, interview_id)
    if not interview:
        raise HTTPException(status_code=404, detail="Interview not found")
    return interview


@router.get("", summary="List interviews")
def list_interviews(candidate_id: Optional[str] = None, db: Session = Depends(get_db)):
    try:
        query = db.query(Interview)
        if candidate_id:
            query = query.filter(Interview.candidate_id == candidate_id)
        return [row_to_dict(i) for i in query.order_by(Interview.start_time.asc()).all()]
    except Exception as e:
        logger.exception(f"Error fetching interviews: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch interviews")


@router.post("", summary="Schedule an interview")
def create_interview(req: InterviewCreate, db: Session = Depends(get_db)):
    try:
        interview = Interview(
            candidate_id=req.candidate_id,
            job_id=req.job_id or None,
            start_time=req.start_time,
            end_time=req.end_time,
            video_link=req.video_link,
            status=req.status or "scheduled",
        )
        db.add(interview)
        db.commit()
        db.refresh(interview)
        return row_to_dict(interview)
    except Exception as e:
        db.rollback()
        logger.exception(f"Error creating interview: {e}")
        raise HTTPException(status_code=500, detail="Failed to create interview")


@router.put("/{interview_id}", summary="Reschedule or change an interview's status")
def update_interview(interview_id: str, req: InterviewUpdate, db: Session = Depends(get_db)):
    updates = req.model_dump(exclude_unset=True)
    if not updates:
        raise HTTPException(status_code=400, detail="No valid fields to update")
    nulled = [f for f in NOT_NULL_FIELDS if f in updates and updates[f] is None]
    if nulled:
        raise HTTPException(status_code=400, detail=f"Fields cannot be null: {', '.join(nulled)}")

    try:
        interview = _get_interview(db, interview_id)
        for key, value in updates.items():
            setattr(interview, key, value)
        db.commit()
        db.refresh(interview)
        return row_to_dict(interview)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception(f"Error updating interview: {e}")
        raise HTTPException(status_code=500, detail="Failed to update interview")


@router.delete("/{interview_id}", summary="Cancel and delete an interview")
def delete_interview(interview_id: str, db: Session = Depends(get_db)):
    try:
        db.delete(_get_interview(db, interview_id))
        db.commit()
        return {"success": True, "id": interview_id}
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception(f"Error deleting interview: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete interview")


@router.get("/{interview_id}/evaluations", summary="List prep-pack ratings for an interview")
def list_evaluations(interview_id: str, db: Session = Depends(get_db)):
    try:
        _get_interview(db, interview_id)
        rows = (
            db.query(Evaluation)
            .filter(Evaluation.interview_id == interview_id)
            .order_by(Evaluation.created_at.asc())
            .all()
        )
        return [row_to_dict(r) for r in rows]
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error fetching evaluations: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch evaluations")


@router.post("/{interview_id}/evaluations", summary="Rate one interview question")
def create_evaluation(interview_id: str, req: EvaluationCreate, db: Session = Depends(get_db)):
    if not (req.question and req.criterion):
        raise HTTPException(status_code=400, detail="question and criterion are required")

    try:
        _get_interview(db, interview_id)
        evaluation = Evaluation(interview_id=interview_id, **req.model_dump())
        db.add(evaluation)
        db.commit()
        db.refresh(evaluation)
        return row_to_dict(evaluation)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception(f"Error saving evaluation: {e}")
        raise HTTPException(status_code=500, detail="Failed to save evaluation")
