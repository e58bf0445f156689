# -*- coding: utf-8 -*-
import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from sqlalchemy import or_
from sqlalchemy.orm import Session

from hireloop.config import PipelineConfig, UploadConfig
from hireloop.core.assistant import HiringAssistant, get_assistant
from hireloop.core.serialization import dump_list, dump_loose
from hireloop.db.database import get_db
from hireloop.db.models import Candidate, Job, JobCandidate, new_id, utcnow
from hireloop.db.serializers import candidate_to_dict, job_to_dict
from hireloop.io.extractors import UnsupportedFileError, extract_upload_text, truncate_resume_text
from hireloop.schemas import AnalyzeRequest, CandidateCreate, CandidateUpdate

logger = logging.getLogger("hireloop.candidates")

router = APIRouter(prefix="/api/candidates", tags=["candidates"])

SORT_COLUMNS = {
    "created_at": Candidate.created_at,
    "fit_score": Candidate.fit_score,
    "name": Candidate.name,
}


def _check_stage(stage: Optional[str]) -> None:
    if stage is not None and stage not in PipelineConfig.STAGES:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid stage '{stage}'. Allowed: {', '.join(PipelineConfig.STAGES)}",
        )


def _escape_like(term: str) -> str:
    # % and _ typed by the user match literally
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _get_candidate(db: Session, candidate_id: str) -> Candidate:
    candidate = db.get(Candidate, candidate_id)
    if not candidate:
        raise HTTPException(status_code=404, detail="Candidate not found")
    return candidate


@router.get("", summary="List candidates")
def list_candidates(
    stage: Optional[str] = None,
    job_id: Optional[str] = None,
    search: Optional[str] = None,
    min_score: Optional[int] = None,
    sort: str = "created_at",
    order: str = "desc",
    db: Session = Depends(get_db),
):
    """
    Lists candidates with their JSON columns parsed. Filters and sorting
    back the dashboard table; without them this is newest-first.
    """
    if sort not in SORT_COLUMNS:
        raise HTTPException(status_code=400, detail=f"Invalid sort '{sort}'. Allowed: {', '.join(SORT_COLUMNS)}")

    try:
        query = db.query(Candidate)
        if stage:
            query = query.filter(Candidate.stage == stage)
        if job_id:
            query = query.filter(Candidate.job_id == job_id)
        if min_score is not None:
            query = query.filter(Candidate.fit_score >= min_score)
        if search:
            like = f"%{_escape_like(search.strip())}%"
            query = query.filter(or_(
                Candidate.name.ilike(like, escape="\\"),
                Candidate.email.ilike(like, escape="\\"),
                Candidate.role.ilike(like, escape="\\"),
            ))

        col = SORT_COLUMNS[sort]
        query = query.order_by(col.asc() if order.lower() == "asc" else col.desc())
        return [candidate_to_dict(c) for c in query.all()]
    except Exception as e:
        logger.exception(f"Error fetching candidates: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch candidates")


@router.post("/upload", summary="Upload a resume, parse it with AI and create a candidate")
async def upload_resume(
    resume: Optional[UploadFile] = File(None),
    jobId: Optional[str] = Form(None),
    db: Session = Depends(get_db),
    assistant: HiringAssistant = Depends(get_assistant),
):
    """
    Accepts a resume (.pdf, .docx or plain text, max 5MB).
    - Text beyond 50,000 characters is cut and annotated before parsing.
    - The LLM extracts contact details, skills, experience and education.
    - The candidate starts in stage "new" with a default fit score of 70.
    """
    if resume is None or not resume.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")

    data = await resume.read()
    if len(data) > UploadConfig.MAX_BYTES:
        raise HTTPException(status_code=413, detail="File too large. Maximum size is 5MB")

    try:
        resume_text = extract_upload_text(data, resume.filename, resume.content_type)
    except UnsupportedFileError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        job = None
        if jobId:
            job = db.get(Job, jobId)
            if not job:
                raise HTTPException(status_code=404, detail="Job not found")

        logger.info(f"Resume upload: Original length: {len(resume_text)} characters")
        truncated = truncate_resume_text(resume_text)
        logger.info(f"Resume upload: Using {len(truncated)} characters for parsing")

        parsed = await assistant.parse_resume(truncated)

        cid = new_id()
        candidate = Candidate(
            id=cid,
            job_id=job.id if job else None,
            name=parsed["name"] or "Unknown",
            email=parsed["email"] or f"unknown-{cid}@example.com",
            phone=parsed["phone"],
            role=parsed["role"] or "General Position",
            location=parsed["location"],
            skills=dump_list(parsed["skills"]),
            experience=dump_loose(parsed["experience"]),
            education=dump_loose(parsed["education"]),
            years_of_experience=parsed["years_of_experience"],
            stage="new",
            fit_score=PipelineConfig.DEFAULT_FIT_SCORE,
            resume_text=truncated,
        )
        db.add(candidate)
        if job:
            db.flush()
            db.add(JobCandidate(job_id=job.id, candidate_id=cid, match_score=candidate.fit_score, status="applied"))
        db.commit()
        db.refresh(candidate)
        logger.info(f"Candidate created from resume: {cid} ({candidate.name})")
        return candidate_to_dict(candidate)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception(f"Error uploading resume: {e}")
        raise HTTPException(status_code=500, detail="Failed to upload resume")


@router.post("", summary="Create a candidate manually")
def create_candidate(req: CandidateCreate, db: Session = Depends(get_db)):
    if not (req.name and req.email and req.role):
        raise HTTPException(status_code=400, detail="name, email and role are required")
    _check_stage(req.stage)

    try:
        if req.job_id and not db.get(Job, req.job_id):
            raise HTTPException(status_code=404, detail="Job not found")

        candidate = Candidate(
            job_id=req.job_id,
            name=req.name,
            email=req.email,
            phone=req.phone,
            role=req.role,
            location=req.location,
            skills=dump_list(req.skills),
            experience=dump_loose(req.experience),
            education=dump_loose(req.education),
            years_of_experience=req.years_of_experience,
            stage=req.stage or "new",
            fit_score=req.fit_score,
            source=req.source or "Manual Entry",
        )
        db.add(candidate)
        db.commit()
        db.refresh(candidate)
        return candidate_to_dict(candidate)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception(f"Error creating candidate: {e}")
        raise HTTPException(status_code=500, detail="Failed to create candidate")


@router.get("/{candidate_id}", summary="Get a single candidate")
def get_candidate(candidate_id: str, db: Session = Depends(get_db)):
    try:
        return candidate_to_dict(_get_candidate(db, candidate_id))
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error fetching candidate: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch candidate")


@router.put("/{candidate_id}", summary="Update a candidate's stage and/or fit score")
def update_candidate(candidate_id: str, req: CandidateUpdate, db: Session = Depends(get_db)):
    """
    Only `stage` and `fit_score` can change here; fields left out of the
    body keep their stored value.
    """
    updates = req.model_dump(exclude_unset=True)
    if not updates:
        raise HTTPException(status_code=400, detail="No valid fields to update")
    if "stage" in updates and updates["stage"] is None:
        raise HTTPException(status_code=400, detail="Fields cannot be null: stage")
    _check_stage(updates.get("stage"))

    try:
        candidate = _get_candidate(db, candidate_id)
        for key, value in updates.items():
            setattr(candidate, key, value)
        candidate.updated_at = utcnow()
        db.commit()
        db.refresh(candidate)
        return candidate_to_dict(candidate)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception(f"Error updating candidate: {e}")
        raise HTTPException(status_code=500, detail="Failed to update candidate")


@router.delete("/{candidate_id}", summary="Delete a candidate")
def delete_candidate(candidate_id: str, db: Session = Depends(get_db)):
    try:
        candidate = _get_candidate(db, candidate_id)
        db.delete(candidate)
        db.commit()
        return {"success": True, "id": candidate_id}
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception(f"Error deleting candidate: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete candidate")


@router.post("/{candidate_id}/analyze", summary="AI fit analysis for a candidate")
async def analyze_candidate(
    candidate_id: str,
    req: Optional[AnalyzeRequest] = None,
    db: Session = Depends(get_db),
    assistant: HiringAssistant = Depends(get_assistant),
):
    """
    Computed on every call and never stored. A candidate object in the body
    (what the profile page currently shows) takes precedence over the row.
    """
    try:
        stored = db.get(Candidate, candidate_id)
        candidate_data = (req.candidate if req else None) or (candidate_to_dict(stored, include_resume=False) if stored else None)
        if not candidate_data:
            raise HTTPException(status_code=404, detail="Candidate not found")

        job_data = None
        job_id = candidate_data.get("job_id") or (stored.job_id if stored else None)
        if job_id:
            job = db.get(Job, job_id)
            if job:
                job_data = job_to_dict(job)

        return await assistant.analyze_candidate(candidate_data, job_data)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error analyzing candidate: {e}")
        raise HTTPException(status_code=500, detail="Failed to analyze candidate")
