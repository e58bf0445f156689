# -*- coding: utf-8 -*-
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _Body(BaseModel):
    # the dashboard mixes camelCase and snake_case, so accept both
    model_config = ConfigDict(populate_by_name=True)


# ---------- Jobs ----------
class JobCreate(_Body):
    title: Optional[str] = None
    department: Optional[str] = None
    location: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    description: Optional[str] = None
    requirements: Optional[List[Any]] = None
    responsibilities: Optional[List[Any]] = None
    deal_breakers: Optional[Union[Dict[str, Any], str]] = None
    auto_sourcing_enabled: Optional[bool] = None
    sourcing_threshold: Optional[int] = None


class JobUpdate(JobCreate):
    """Same whitelist as create; only the fields actually sent are applied."""


class JobParseRequest(_Body):
    job_text: str = Field("", alias="jobText")


# ---------- Candidates ----------
class CandidateCreate(_Body):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[str] = None
    location: Optional[str] = None
    skills: Optional[List[Any]] = None
    experience: Optional[Any] = None
    education: Optional[Any] = None
    years_of_experience: Optional[int] = None
    stage: Optional[str] = None
    fit_score: Optional[int] = None
    source: Optional[str] = None
    job_id: Optional[str] = Field(None, alias="jobId")


class CandidateUpdate(_Body):
    stage: Optional[str] = None
    fit_score: Optional[int] = None


class AnalyzeRequest(_Body):
    candidate: Optional[Dict[str, Any]] = None


class SourcingRequest(_Body):
    job_id: Optional[str] = Field(None, alias="jobId")


# ---------- Outreach ----------
class GenerateEmailRequest(_Body):
    candidate_id: Optional[str] = Field(None, alias="candidateId")
    job_id: Optional[str] = Field(None, alias="jobId")
    type: Optional[str] = "initial"


class OutreachEmailCreate(_Body):
    candidate_id: Optional[str] = Field(None, alias="candidateId")
    job_id: Optional[str] = Field(None, alias="jobId")
    subject: Optional[str] = None
    body: Optional[str] = None
    status: Optional[str] = None
    sequence_day: Optional[int] = Field(None, alias="sequenceDay")


class OutreachEmailUpdate(_Body):
    status: str


# ---------- Interviews ----------
class InterviewCreate(_Body):
    candidate_id: Optional[str] = Field(None, alias="candidateId")
    job_id: Optional[str] = Field(None, alias="jobId")
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    video_link: Optional[str] = None
    status: Optional[str] = None


class InterviewUpdate(_Body):
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    video_link: Optional[str] = None
    status: Optional[str] = None


class EvaluationCreate(_Body):
    question: Optional[str] = None
    criterion: Optional[str] = None
    listen_for: Optional[str] = Field(None, alias="listenFor")
    rating: Optional[int] = None
    notes: Optional[str] = None


# ---------- Scorecards ----------
class ScorecardCreate(_Body):
    candidate_id: Optional[str] = Field(None, alias="candidateId")
    job_id: Optional[str] = Field(None, alias="jobId")
    interviewer_id: Optional[str] = Field(None, alias="interviewerId")
    stage: Optional[str] = None
    scores: Optional[Dict[str, Any]] = None
    feedback: Optional[str] = None


# ---------- Templates / Settings / Integrations / Contact ----------
class TemplateBody(_Body):
    name: Optional[str] = None
    subject: Optional[str] = None
    body: Optional[str] = None
    category: Optional[str] = None


class SettingsBody(_Body):
    company_name: Optional[str] = None
    website: Optional[str] = None
    auto_reject_threshold: Optional[Union[str, int, float]] = None
    email_notifications: Optional[bool] = None


class IntegrationBody(_Body):
    id: str
    name: Optional[str] = None
    status: str
    config: Optional[Dict[str, Any]] = None


class ContactBody(_Body):
    name: Optional[str] = None
    email: Optional[str] = None
    company: Optional[str] = None
    message: Optional[str] = None
