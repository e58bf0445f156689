# -*- coding: utf-8 -*-
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from hireloop.core.assistant import HiringAssistant, get_assistant
from hireloop.core.serialization import dump_list, dump_loose
from hireloop.db.database import get_db
from hireloop.db.models import Candidate, Job, JobCandidate, new_id
from hireloop.db.serializers import job_to_dict
from hireloop.schemas import SourcingRequest

logger = logging.getLogger("hireloop.sourcing")

router = APIRouter(prefix="/api/sourcing", tags=["sourcing"])


@router.post("/run", summary="Generate AI-sourced candidates for a job")
async def run_sourcing(
    req: SourcingRequest,
    db: Session = Depends(get_db),
    assistant: HiringAssistant = Depends(get_assistant),
):
    """
    Asks the LLM for three plausible profiles matching the job and inserts
    them as new candidates. No external search happens: the profiles are
    generated, not found.
    """
    try:
        job = db.get(Job, req.job_id) if req.job_id else None
        if not job:
            raise HTTPException(status_code=404, detail="Job not found")

        profiles = await assistant.source_candidates(job_to_dict(job))

        created = []
        for p in profiles:
            cid = new_id()
            email = p["email"] or f"unknown-{cid}@example.com"
            db.add(Candidate(
                id=cid,
                job_id=job.id,
                name=p["name"],
                email=email,
                role=p["role"],
                location=p["location"],
                years_of_experience=p["years_of_experience"],
                skills=dump_list(p["skills"]),
                experience=dump_loose(p["experience"]),
                education=dump_loose(p["education"]),
                fit_score=p["fit_score"],
                stage="new",
                source="AI Sourcing",
            ))
            created.append({**p, "id": cid, "email": email, "job_id": job.id, "stage": "new", "source": "AI Sourcing"})

        db.flush()
        for c in created:
            db.add(JobCandidate(job_id=job.id, candidate_id=c["id"], match_score=c["fit_score"], status="sourced"))

        db.commit()
        logger.info(f"Sourced {len(created)} candidate(s) for job {job.id}")
        return {"candidates": created}
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception(f"Sourcing error: {e}")
        raise HTTPException(status_code=500, detail="Failed to source candidates")
