# -*- coding: utf-8 -*-
import logging
from typing import Any, Dict, List, Optional

from hireloop.config import PipelineConfig
from hireloop.core import prompts
from hireloop.llm.client import LLMClient, LLMResponseError, llm_client

logger = logging.getLogger("hireloop.assistant")


def _as_int(value: Any, default: Optional[int] = None) -> Optional[int]:
    if value is None or value == "":
        return default
    try:
        return int(round(float(value)))
    except (TypeError, ValueError):
        return default


def _as_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def _as_str_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if v is not None and str(v).strip()]


class HiringAssistant:
    """
    All the LLM-backed operations. Each method owns its prompt, its
    temperature and how a sloppy reply is coerced into the shape the
    routes expect.
    """

    def __init__(self, client: LLMClient):
        self.client = client

    async def parse_job(self, job_text: str) -> Dict[str, Any]:
        result = await self.client.complete_json(
            prompts.JOB_PARSER_SYSTEM,
            prompts.job_parse_prompt(job_text),
            temperature=0.3,
            default={},
        )
        if not isinstance(result, dict):
            result = {}
        return {
            "title": result.get("title") or "Untitled Position",
            "department": result.get("department") or "General",
            "location": result.get("location") or "Remote",
            "type": result.get("type") or "Full-time",
            "description": result.get("description") or job_text,
            "requirements": _as_str_list(result.get("requirements")),
            "responsibilities": _as_str_list(result.get("responsibilities")),
        }

    async def parse_resume(self, resume_text: str) -> Dict[str, Any]:
        result = await self.client.complete_json(
            prompts.RESUME_PARSER_SYSTEM,
            prompts.resume_parse_prompt(resume_text),
            temperature=0.3,
        )
        if not isinstance(result, dict):
            raise LLMResponseError("Resume parse did not return a JSON object")

        return {
            "name": _as_str(result.get("name")),
            "email": _as_str(result.get("email")),
            "phone": _as_str(result.get("phone")),
            "location": _as_str(result.get("location")),
            "role": _as_str(result.get("role")),
            "summary": _as_str(result.get("summary")),
            "skills": _as_str_list(result.get("skills")),
            # prose, a list or an object
            "experience": result.get("experience"),
            "education": result.get("education"),
            "years_of_experience": _as_int(result.get("yearsOfExperience"), 0),
        }

    async def analyze_candidate(self, candidate: Dict[str, Any], job: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        result = await self.client.complete_json(
            prompts.CANDIDATE_ANALYST_SYSTEM,
            prompts.analysis_prompt(candidate, job),
            temperature=0.4,
            default={},
        )
        return result if isinstance(result, dict) else {}

    async def hiring_insights(self, job: Dict[str, Any]) -> Dict[str, Any]:
        result = await self.client.complete_json(
            prompts.INSIGHTS_SYSTEM,
            prompts.insights_prompt(job),
            temperature=0.4,
            default={},
        )
        return result if isinstance(result, dict) else {}

    async def outreach_email(self, candidate: Dict[str, Any], job: Dict[str, Any], email_type: str = "initial") -> Dict[str, Any]:
        result = await self.client.complete_json(
            prompts.OUTREACH_SYSTEM,
            prompts.outreach_prompt(candidate, job, email_type),
            default={},
        )
        return result if isinstance(result, dict) else {}

    async def source_candidates(self, job: Dict[str, Any], count: int = PipelineConfig.SOURCED_PER_RUN) -> List[Dict[str, Any]]:
        result = await self.client.complete_json(
            prompts.SOURCER_SYSTEM,
            prompts.sourcing_prompt(job, count),
        )
        profiles = result.get("candidates") if isinstance(result, dict) else None
        if not isinstance(profiles, list):
            raise LLMResponseError("Sourcing reply has no 'candidates' array")

        out = []
        for p in profiles:
            if not isinstance(p, dict):
                continue
            out.append({
                "name": _as_str(p.get("name")) or "Unknown",
                "email": _as_str(p.get("email")) or "",
                "role": _as_str(p.get("role")) or "General Position",
                "location": _as_str(p.get("location")),
                "years_of_experience": _as_int(p.get("years_of_experience")),
                "skills": _as_str_list(p.get("skills")),
                "experience": p.get("experience"),
                "education": p.get("education"),
                "fit_score": _as_int(p.get("fit_score")),
                "summary": _as_str(p.get("summary")),
            })
        logger.info(f"Sourcing produced {len(out)} profile(s) for '{job.get('title')}'")
        return out


def get_assistant() -> HiringAssistant:
    """FastAPI dependency; tests swap in an assistant backed by a fake client."""
    return HiringAssistant(llm_client)
