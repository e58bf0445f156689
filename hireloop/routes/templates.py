# -*- coding: utf-8 -*-
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from hireloop.db.database import get_db
from hireloop.db.models import EmailTemplate
from hireloop.db.serializers import row_to_dict
from hireloop.schemas import TemplateBody

logger = logging.getLogger("hireloop.templates")

router = APIRouter(prefix="/api/templates", tags=["templates"])

REQUIRED_FIELDS = ("name", "subject", "body", "category")


@router.get("", summary="List email templates")
def list_templates(db: Session = Depends(get_db)):
    try:
        rows = db.query(EmailTemplate).order_by(EmailTemplate.created_at.desc()).all()
        return [row_to_dict(t) for t in rows]
    except Exception as e:
        logger.exception(f"Error fetching templates: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch templates")


@router.post("", summary="Create an email template")
def create_template(req: TemplateBody, db: Session = Depends(get_db)):
    try:
        template = EmailTemplate(**req.model_dump())
        db.add(template)
        db.commit()
        db.refresh(template)
        return {"id": template.id, **req.model_dump()}
    except Exception as e:
        db.rollback()
        logger.exception(f"Error creating template: {e}")
        raise HTTPException(status_code=500, detail="Failed to create template")


@router.put("/{template_id}", summary="Replace an email template")
def update_template(template_id: str, req: TemplateBody, db: Session = Depends(get_db)):
    data = req.model_dump()
    missing = [f for f in REQUIRED_FIELDS if not data.get(f)]
    if missing:
        raise HTTPException(status_code=400, detail=f"Missing required fields: {', '.join(missing)}")

    try:
        template = db.get(EmailTemplate, template_id)
        if not template:
            raise HTTPException(status_code=404, detail="Template not found")
        for key, value in data.items():
            setattr(template, key, value)
        db.commit()
        return {"id": template_id, **data}
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception(f"Error updating template: {e}")
        raise HTTPException(status_code=500, detail="Failed to update template")


@router.delete("/{template_id}", summary="Delete an email template")
def delete_template(template_id: str, db: Session = Depends(get_db)):
    try:
        db.query(EmailTemplate).filter(EmailTemplate.id == template_id).delete()
        db.commit()
        return {"success": True}
    except Exception as e:
        db.rollback()
        logger.exception(f"Error deleting template: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete template")
