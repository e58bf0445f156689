# -*- coding: utf-8 -*-
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from hireloop.catalog.catalog_loader import load_integration_catalog, merge_with_stored
from hireloop.config import PipelineConfig
from hireloop.core.serialization import dump_object
from hireloop.db.database import get_db
from hireloop.db.models import Integration, utcnow
from hireloop.db.serializers import integration_to_dict
from hireloop.schemas import IntegrationBody

logger = logging.getLogger("hireloop.integrations")

router = APIRouter(prefix="/api/integrations", tags=["integrations"])


@router.get("", summary="List integrations and their connection status")
def list_integrations(db: Session = Depends(get_db)):
    try:
        stored = [integration_to_dict(i) for i in db.query(Integration).all()]
        return merge_with_stored(load_integration_catalog(), stored)
    except Exception as e:
        logger.exception(f"Error fetching integrations: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch integrations")


@router.post("", summary="Connect or disconnect an integration")
def update_integration(req: IntegrationBody, db: Session = Depends(get_db)):
    if req.status not in PipelineConfig.INTEGRATION_STATUSES:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid status '{req.status}'. Allowed: {', '.join(PipelineConfig.INTEGRATION_STATUSES)}",
        )

    try:
        row = db.get(Integration, req.id)
        if row:
            row.status = req.status
            if req.config is not None:
                row.config = dump_object(req.config)
            row.updated_at = utcnow()
            name = row.name
        else:
            catalog = {item.id: item for item in load_integration_catalog()}
            name = req.name or (catalog[req.id].name if req.id in catalog else req.id)
            db.add(Integration(id=req.id, name=name, status=req.status, config=dump_object(req.config)))
        db.commit()
        logger.info(f"Integration {req.id} -> {req.status}")
        return {"success": True, "id": req.id, "name": name, "status": req.status}
    except Exception as e:
        db.rollback()
        logger.exception(f"Error updating integration: {e}")
        raise HTTPException(status_code=500, detail="Failed to update integration")
