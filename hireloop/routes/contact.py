# -*- coding: utf-8 -*-
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from hireloop.db.database import get_db
from hireloop.db.models import ContactRequest
from hireloop.schemas import ContactBody

logger = logging.getLogger("hireloop.contact")

router = APIRouter(prefix="/api/contact", tags=["contact"])


@router.post("", summary="Submit a contact / demo request")
def submit_contact(req: ContactBody, db: Session = Depends(get_db)):
    try:
        db.add(ContactRequest(
            name=req.name,
            email=req.email,
            company=req.company or None,
            message=req.message,
        ))
        db.commit()
        return {"success": True}
    except Exception as e:
        db.rollback()
        logger.exception(f"Error saving contact: {e}")
        raise HTTPException(status_code=500, detail="Failed to save contact request")
