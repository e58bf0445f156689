# -*- coding: utf-8 -*-
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from hireloop.core.assistant import HiringAssistant, get_assistant
from hireloop.db.database import get_db
from hireloop.db.models import Candidate, Job, OutreachEmail, utcnow
from hireloop.db.serializers import candidate_to_dict, job_to_dict, row_to_dict
from hireloop.schemas import GenerateEmailRequest, OutreachEmailCreate, OutreachEmailUpdate

logger = logging.getLogger("hireloop.outreach")

router = APIRouter(prefix="/api/outreach", tags=["outreach"])

# status -> timestamp column stamped the first time the email reaches it
STATUS_TIMESTAMPS = {
    "sent": "sent_at",
    "opened": "opened_at",
    "replied": "replied_at",
}


@router.post("/generate-email", summary="Draft an outreach email with AI")
async def generate_email(
    req: GenerateEmailRequest,
    db: Session = Depends(get_db),
    assistant: HiringAssistant = Depends(get_assistant),
):
    try:
        candidate = db.get(Candidate, req.candidate_id) if req.candidate_id else None
        job = db.get(Job, req.job_id) if req.job_id else None
        if not candidate or not job:
            raise HTTPException(status_code=404, detail="Candidate or Job not found")

        return await assistant.outreach_email(
            candidate_to_dict(candidate, include_resume=False),
            job_to_dict(job),
            req.type or "initial",
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Email generation error: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate email")


@router.get("/emails", summary="List outreach emails")
def list_emails(candidate_id: Optional[str] = None, db: Session = Depends(get_db)):
    try:
        query = db.query(OutreachEmail)
        if candidate_id:
            query = query.filter(OutreachEmail.candidate_id == candidate_id)
        emails = query.order_by(OutreachEmail.sent_at.desc(), OutreachEmail.created_at.desc()).all()
        return [row_to_dict(e) for e in emails]
    except Exception as e:
        logger.exception(f"Error fetching emails: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch emails")


@router.post("/emails", summary="Record a sent outreach email")
def save_email(req: OutreachEmailCreate, db: Session = Depends(get_db)):
    try:
        email = OutreachEmail(
            candidate_id=req.candidate_id,
            job_id=req.job_id,
            sequence_day=req.sequence_day or 0,
            subject=req.subject,
            body=req.body,
            status=req.status or "sent",
            sent_at=utcnow(),
        )
        db.add(email)
        db.commit()
        db.refresh(email)
        return row_to_dict(email)
    except Exception as e:
        db.rollback()
        logger.exception(f"Error saving email: {e}")
        raise HTTPException(status_code=500, detail="Failed to save email")


@router.put("/emails/{email_id}", summary="Update an outreach email's status")
def update_email(email_id: str, req: OutreachEmailUpdate, db: Session = Depends(get_db)):
    """
    Moving to "opened" or "replied" stamps opened_at / replied_at once;
    later updates keep the first timestamp.
    """
    try:
        email = db.get(OutreachEmail, email_id)
        if not email:
            raise HTTPException(status_code=404, detail="Email not found")

        email.status = req.status
        column = STATUS_TIMESTAMPS.get(req.status)
        if column and getattr(email, column) is None:
            setattr(email, column, utcnow())

        db.commit()
        db.refresh(email)
        return row_to_dict(email)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception(f"Error updating email: {e}")
        raise HTTPException(status_code=500, detail="Failed to update email")
