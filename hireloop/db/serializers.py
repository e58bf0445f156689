# -*- coding: utf-8 -*-
from typing import Any, Dict

from sqlalchemy import inspect as sa_inspect

from hireloop.core.serialization import parse_list, parse_loose, parse_object


def row_to_dict(obj) -> Dict[str, Any]:
    """Plain column -> value mapping for any ORM row."""
    return {c.key: getattr(obj, c.key) for c in sa_inspect(obj).mapper.column_attrs}


def job_to_dict(job) -> Dict[str, Any]:
    data = row_to_dict(job)
    data["requirements"] = parse_list(job.requirements)
    data["responsibilities"] = parse_list(job.responsibilities)
    data["deal_breakers"] = parse_object(job.deal_breakers)
    data["auto_sourcing_enabled"] = bool(job.auto_sourcing_enabled)
    return data


def candidate_to_dict(candidate, include_resume: bool = True) -> Dict[str, Any]:
    data = row_to_dict(candidate)
    data["skills"] = parse_list(candidate.skills)
    data["experience"] = parse_loose(candidate.experience)
    data["education"] = parse_loose(candidate.education)
    data["fit_score_breakdown"] = parse_object(candidate.fit_score_breakdown)
    if not include_resume:
        data.pop("resume_text", None)
    return data


def scorecard_to_dict(scorecard) -> Dict[str, Any]:
    data = row_to_dict(scorecard)
    data["scores"] = parse_object(scorecard.scores) or {}
    return data


def integration_to_dict(integration) -> Dict[str, Any]:
    data = row_to_dict(integration)
    data["config"] = parse_object(integration.config)
    return data


def settings_to_dict(settings) -> Dict[str, Any]:
    data = row_to_dict(settings)
    if data.get("email_notifications") is not None:
        data["email_notifications"] = bool(data["email_notifications"])
    return data
