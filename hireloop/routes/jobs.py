# -*- coding: utf-8 -*-
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from hireloop.config import PipelineConfig
from hireloop.core.assistant import HiringAssistant, get_assistant
from hireloop.core.metrics import health_metrics, stage_counts
from hireloop.core.serialization import dump_list, dump_object
from hireloop.db.database import get_db
from hireloop.db.models import DEFAULT_DEAL_BREAKERS, Candidate, Job, utcnow
from hireloop.db.serializers import job_to_dict
from hireloop.schemas import JobCreate, JobParseRequest, JobUpdate

logger = logging.getLogger("hireloop.jobs")

router = APIRouter(prefix="/api/jobs", tags=["jobs"])

LIST_FIELDS = {"requirements", "responsibilities"}
NOT_NULL_FIELDS = ("title", "department", "location", "type", "status")


def _check_not_null(updates: dict) -> None:
    nulled = [f for f in NOT_NULL_FIELDS if f in updates and updates[f] is None]
    if nulled:
        raise HTTPException(status_code=400, detail=f"Fields cannot be null: {', '.join(nulled)}")


def _check_status(status: Optional[str]) -> None:
    if status is not None and status not in PipelineConfig.JOB_STATUSES:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid status '{status}'. Allowed: {', '.join(PipelineConfig.JOB_STATUSES)}",
        )


def _get_job(db: Session, job_id: str) -> Job:
    job = db.get(Job, job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return job


@router.get("", summary="List all jobs")
def list_jobs(status: Optional[str] = None, db: Session = Depends(get_db)):
    """
    Lists jobs, newest first. `status` narrows to draft / published / closed.
    """
    try:
        query = db.query(Job)
        if status:
            query = query.filter(Job.status == status)
        jobs = query.order_by(Job.created_at.desc()).all()
        return [job_to_dict(j) for j in jobs]
    except Exception as e:
        logger.exception(f"Error fetching jobs: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch jobs")


@router.post("/parse", summary="Parse a raw job description with AI")
async def parse_job(req: JobParseRequest, assistant: HiringAssistant = Depends(get_assistant)):
    """
    Sends the pasted job text to the LLM and returns a structured guess
    (title, department, location, type, description, requirements,
    responsibilities). Nothing is saved.
    """
    try:
        return await assistant.parse_job(req.job_text)
    except Exception as e:
        logger.exception(f"Error parsing job: {e}")
        raise HTTPException(status_code=500, detail="Failed to parse job description")


@router.get("/{job_id}", summary="Get a single job")
def get_job(job_id: str, db: Session = Depends(get_db)):
    try:
        return job_to_dict(_get_job(db, job_id))
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error fetching job: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch job")


@router.post("", summary="Create a job")
def create_job(req: JobCreate, db: Session = Depends(get_db)):
    """
    Status defaults to "draft"; list fields are stored as JSON text.
    """
    _check_status(req.status)
    try:
        job = Job(
            title=req.title,
            department=req.department,
            location=req.location,
            type=req.type,
            status=req.status or "draft",
            description=req.description,
            requirements=dump_list(req.requirements),
            responsibilities=dump_list(req.responsibilities),
            deal_breakers=dump_object(req.deal_breakers) or DEFAULT_DEAL_BREAKERS,
            auto_sourcing_enabled=bool(req.auto_sourcing_enabled),
            sourcing_threshold=req.sourcing_threshold or PipelineConfig.DEFAULT_SOURCING_THRESHOLD,
        )
        db.add(job)
        db.commit()
        db.refresh(job)
        logger.info(f"Job created: {job.id} ({job.title})")
        return job_to_dict(job)
    except Exception as e:
        db.rollback()
        logger.exception(f"Error creating job: {e}")
        raise HTTPException(status_code=500, detail="Failed to create job")


@router.put("/{job_id}", summary="Partially update a job")
def update_job(job_id: str, req: JobUpdate, db: Session = Depends(get_db)):
    updates = req.model_dump(exclude_unset=True)
    if not updates:
        raise HTTPException(status_code=400, detail="No valid fields to update")
    _check_not_null(updates)
    _check_status(updates.get("status"))

    try:
        job = _get_job(db, job_id)
        for key, value in updates.items():
            if key in LIST_FIELDS:
                value = dump_list(value)
            elif key == "deal_breakers":
                value = dump_object(value)
            elif key == "auto_sourcing_enabled":
                value = bool(value)
            setattr(job, key, value)
        job.updated_at = utcnow()
        db.commit()
        db.refresh(job)
        return job_to_dict(job)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception(f"Error updating job: {e}")
        raise HTTPException(status_code=500, detail="Failed to update job")


@router.delete("/{job_id}", summary="Delete a job")
def delete_job(job_id: str, db: Session = Depends(get_db)):
    """
    Scorecards and job_candidates rows go with the job; interviews,
    outreach emails and candidates keep their rows with job_id nulled.
    """
    try:
        job = _get_job(db, job_id)
        db.delete(job)
        db.commit()
        logger.info(f"Job deleted: {job_id}")
        return {"success": True, "id": job_id}
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception(f"Error deleting job: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete job")


@router.get("/{job_id}/dashboard", summary="Job dashboard: pipeline stats, health and AI insights")
async def job_dashboard(
    job_id: str,
    db: Session = Depends(get_db),
    assistant: HiringAssistant = Depends(get_assistant),
):
    try:
        job = _get_job(db, job_id)
        job_data = job_to_dict(job)

        stages = [s for (s,) in db.query(Candidate.stage).filter(Candidate.job_id == job_id).all()]
        pipeline_stats = stage_counts(stages)

        ai_insights = await assistant.hiring_insights(job_data)

        return {
            "job": job_data,
            "aiInsights": ai_insights,
            "pipelineStats": pipeline_stats,
            "healthMetrics": health_metrics(pipeline_stats["total"]),
        }
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error getting job dashboard: {e}")
        raise HTTPException(status_code=500, detail="Failed to get job dashboard")
