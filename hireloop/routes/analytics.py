# -*- coding: utf-8 -*-
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func
from sqlalchemy.orm import Session

from hireloop.config import PipelineConfig
from hireloop.core.metrics import health_metrics, stage_counts
from hireloop.db.database import get_db
from hireloop.db.models import Candidate, Interview, Job, OutreachEmail
from hireloop.db.serializers import candidate_to_dict

logger = logging.getLogger("hireloop.analytics")

router = APIRouter(prefix="/api", tags=["analytics"])

RECENT_LIMIT = 10


def _recent_activity(db: Session) -> List[Dict[str, Any]]:
    events: List[Dict[str, Any]] = []

    for c in db.query(Candidate).order_by(Candidate.created_at.desc()).limit(RECENT_LIMIT):
        events.append({
            "id": c.id,
            "type": "application",
            "description": f"{c.name} added via {c.source or 'Direct Application'}",
            "timestamp": c.created_at,
        })

    for i in db.query(Interview).order_by(Interview.created_at.desc()).limit(RECENT_LIMIT):
        events.append({
            "id": i.id,
            "type": "interview",
            "description": f"Interview {i.status} for {i.start_time}",
            "timestamp": i.created_at,
        })

    for e in db.query(OutreachEmail).order_by(OutreachEmail.created_at.desc()).limit(RECENT_LIMIT):
        events.append({
            "id": e.id,
            "type": "outreach",
            "description": f"Email '{e.subject}' {e.status}",
            "timestamp": e.created_at,
        })

    events = [ev for ev in events if ev["timestamp"] is not None]
    events.sort(key=lambda ev: ev["timestamp"], reverse=True)
    return events[:RECENT_LIMIT]


@router.get("/analytics/overview", summary="Workspace-wide hiring metrics")
def analytics_overview(db: Session = Depends(get_db)):
    try:
        stages = [s for (s,) in db.query(Candidate.stage).all()]
        counts = stage_counts(stages)

        sources = {
            (src or "Direct Application"): n
            for src, n in db.query(Candidate.source, func.count(Candidate.id)).group_by(Candidate.source).all()
        }
        avg_fit = db.query(func.avg(Candidate.fit_score)).scalar()
        active_jobs = db.query(func.count(Job.id)).filter(Job.status == "published").scalar() or 0

        return {
            "totalCandidates": counts["total"],
            "activeJobs": active_jobs,
            "stageCounts": counts,
            "sourceBreakdown": sources,
            "averageFitScore": round(float(avg_fit), 1) if avg_fit is not None else None,
            "pipelineHealth": health_metrics(counts["total"]),
            "recentActivity": _recent_activity(db),
        }
    except Exception as e:
        logger.exception(f"Error building analytics overview: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch analytics")


@router.get("/pipeline", summary="Candidates grouped by stage for the pipeline board")
def pipeline_board(job_id: Optional[str] = None, db: Session = Depends(get_db)):
    """
    One column per stage in pipeline order, highest fit score first.
    Candidates whose stage is outside the enum are left off the board.
    """
    try:
        query = db.query(Candidate)
        if job_id:
            query = query.filter(Candidate.job_id == job_id)
        rows = query.order_by(Candidate.fit_score.desc(), Candidate.created_at.desc()).all()

        columns: Dict[str, List[Dict[str, Any]]] = {stage: [] for stage in PipelineConfig.STAGES}
        for c in rows:
            if c.stage in columns:
                columns[c.stage].append(candidate_to_dict(c, include_resume=False))

        return {"stages": [{"stage": s, "candidates": columns[s]} for s in PipelineConfig.STAGES]}
    except Exception as e:
        logger.exception(f"Error building pipeline board: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch pipeline")
