# -*- coding: utf-8 -*-
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

CATALOG_PATH = Path(__file__).resolve().parent / "integrations.yaml"


@dataclass(frozen=True)
class IntegrationItem:
    id: str
    name: str
    description: str
    category: str
    status: str = "disconnected"


def load_integration_catalog(path: Optional[str] = None) -> List[IntegrationItem]:
    p = Path(path) if path else CATALOG_PATH
    if not p.exists():
        raise FileNotFoundError(f"integrations.yaml not found: {p}")

    raw = yaml.safe_load(p.read_text(encoding="utf-8", errors="ignore")) or {}
    items_raw = raw.get("integrations")
    if not isinstance(items_raw, dict):
        raise ValueError("integrations.yaml must have a top-level 'integrations' mapping.")

    out: List[IntegrationItem] = []
    for key, it in items_raw.items():
        it = it or {}
        if not isinstance(it, dict):
            continue
        key = str(key).strip()
        if not key:
            continue
        out.append(
            IntegrationItem(
                id=key,
                name=str(it.get("name") or key),
                description=str(it.get("description") or ""),
                category=str(it.get("category") or "other"),
            )
        )
    return out


def merge_with_stored(catalog: List[IntegrationItem], stored: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Catalog order first, stored status winning; stored ids the catalog
    does not know about are appended as-is.
    """
    by_id = {row["id"]: row for row in stored}
    merged: List[Dict[str, Any]] = []

    for item in catalog:
        row = by_id.pop(item.id, None)
        entry = {
            "id": item.id,
            "name": item.name,
            "description": item.description,
            "category": item.category,
            "status": item.status,
            "config": None,
            "updated_at": None,
        }
        if row:
            entry["status"] = row.get("status") or item.status
            entry["config"] = row.get("config")
            entry["updated_at"] = row.get("updated_at")
        merged.append(entry)

    for row in stored:
        if row["id"] in by_id:
            merged.append({"description": "", "category": "other", **row})

    return merged
