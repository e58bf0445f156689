# -*- coding: utf-8 -*-
import json
from typing import Any, Dict, Optional

COMPANY_NAME = "HireLoop"

JOB_PARSER_SYSTEM = (
    "You are an HR assistant that turns raw job postings into structured data. "
    "Reply with a JSON object with the keys: title, department, location, "
    "type (Full-time, Part-time or Contract), description, "
    "requirements (array of strings) and responsibilities (array of strings)."
)

RESUME_PARSER_SYSTEM = (
    "You extract structured data from resumes. Reply with a JSON object with the keys: "
    "name, email, phone, location, role (current job title), summary, "
    "skills (array of strings), experience, education and yearsOfExperience (number)."
)

CANDIDATE_ANALYST_SYSTEM = (
    "You are a talent assessor comparing a candidate against a specific job. "
    "Be concrete and reply with a JSON object."
)

INSIGHTS_SYSTEM = (
    "You are a senior hiring manager advising on how to hire for a role. "
    "Reply with a JSON object."
)

OUTREACH_SYSTEM = (
    "You write short, personal recruiting outreach emails. "
    "Reply with a JSON object with the keys subject and body."
)

SOURCER_SYSTEM = (
    "You generate realistic but fictional candidate profiles for a job opening. "
    "Reply with a JSON object holding a \"candidates\" array."
)


def job_parse_prompt(job_text: str) -> str:
    return f"Parse this job description:\n\n{job_text}"


def resume_parse_prompt(resume_text: str) -> str:
    return f"Parse this resume:\n\n{resume_text}"


def _job_block(job: Dict[str, Any]) -> str:
    return (
        f"Title: {job.get('title')}\n"
        f"Department: {job.get('department')}\n"
        f"Location: {job.get('location')}\n"
        f"Type: {job.get('type')}\n"
        f"Description: {job.get('description')}\n"
        f"Requirements: {json.dumps(job.get('requirements') or [])}\n"
        f"Responsibilities: {json.dumps(job.get('responsibilities') or [])}"
    )


def insights_prompt(job: Dict[str, Any]) -> str:
    return f"""Give hiring insights for this job posting.

{_job_block(job)}

Return JSON with:
- mustHaveSkills: 5-7 critical skills (array of strings)
- niceToHaveSkills: 3-5 bonus skills (array of strings)
- dealBreakers: 3-4 absolute requirements (array of strings)
- hiringGuide: guidance for the hiring manager (string, a few paragraphs)
- keyCompetencies: 4-6 competencies to assess (array of strings)
- interviewFocus: 3-4 areas to probe in interviews (array of strings)"""


def analysis_prompt(candidate: Dict[str, Any], job: Optional[Dict[str, Any]] = None) -> str:
    job_context = "No target job on file; assess general strength for the stated role."
    if job:
        breakers = job.get("deal_breakers") or {}
        job_context = (
            f"Target job:\n{_job_block(job)}\n"
            f"Deal breakers: location must be {job.get('location')}, "
            f"type must be {job.get('type')}, flags {json.dumps(breakers)}"
        )

    return f"""Assess this candidate against the job context.

{job_context}

Candidate:
Name: {candidate.get('name')}
Role: {candidate.get('role')}
Experience: {candidate.get('years_of_experience')} years
Skills: {json.dumps(candidate.get('skills') or [])}
Location: {candidate.get('location')}

Return JSON with:
- summary: 2-3 sentence professional summary (string)
- strengths: 3-4 strengths relevant to the job (array of strings)
- gaps: 2-3 concerns relative to the requirements (array of strings)
- fitScore: object with overall, skills, experience, education (0-100 each)
- dealBreakerCheck: object with passed (boolean) and details (array of strings)
- recommendation: hiring recommendation (string, 2-3 sentences)"""


def outreach_prompt(candidate: Dict[str, Any], job: Dict[str, Any], email_type: str = "initial") -> str:
    return f"""Write a {email_type or 'initial'} outreach email to this candidate.

Candidate: {candidate.get('name')}
Current role: {candidate.get('role')}
Skills: {json.dumps(candidate.get('skills') or [])}

Job: {job.get('title')}
Company: {COMPANY_NAME}
Description: {job.get('description')}

Keep it professional and personal. Return JSON with "subject" and "body"."""


def sourcing_prompt(job: Dict[str, Any], count: int = 3) -> str:
    return f"""Generate {count} realistic candidate profiles for this job.

Title: {job.get('title')}
Description: {job.get('description')}

Each candidate needs:
- name
- email (fake)
- role (current title)
- location
- years_of_experience (number)
- skills (array of strings)
- experience (array of objects with company, title, duration, description)
- education (object with degree, institution, year)
- fit_score (number 0-100)
- summary (string)

Return a JSON object whose "candidates" key holds the array."""
