# -*- coding: utf-8 -*-
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from hireloop.db.database import get_db
from hireloop.db.models import Settings, utcnow
from hireloop.db.serializers import settings_to_dict
from hireloop.schemas import SettingsBody

logger = logging.getLogger("hireloop.settings")

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("", summary="Get workspace settings")
def get_settings(db: Session = Depends(get_db)):
    try:
        row = db.query(Settings).first()
        return settings_to_dict(row) if row else {}
    except Exception as e:
        logger.exception(f"Error fetching settings: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch settings")


@router.post("", summary="Save workspace settings")
def save_settings(req: SettingsBody, db: Session = Depends(get_db)):
    """
    Settings live in a single row: the first save inserts it, every later
    save overwrites it.
    """
    try:
        threshold = req.auto_reject_threshold
        values = {
            "company_name": req.company_name,
            "website": req.website,
            "auto_reject_threshold": str(threshold) if threshold is not None else None,
            "email_notifications": bool(req.email_notifications),
        }

        row = db.query(Settings).first()
        if row:
            for key, value in values.items():
                setattr(row, key, value)
            row.updated_at = utcnow()
        else:
            db.add(Settings(**values))
        db.commit()
        return {"success": True}
    except Exception as e:
        db.rollback()
        logger.exception(f"Error saving settings: {e}")
        raise HTTPException(status_code=500, detail="Failed to save settings")
