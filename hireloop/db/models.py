# -*- coding: utf-8 -*-
import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)

from hireloop.db.database import Base

DEFAULT_DEAL_BREAKERS = '{"location_match": false, "no_sponsorship": false, "onsite_required": false}'


def new_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    # naive UTC, which is what SQLite hands back
    return datetime.now(timezone.utc).replace(tzinfo=None)


class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, default=new_id)
    email = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)
    created_at = Column(DateTime, default=utcnow)


class Job(Base):
    __tablename__ = "jobs"

    id = Column(String, primary_key=True, default=new_id)

    # Core Fields
    title = Column(String, nullable=False)
    department = Column(String, nullable=False)
    location = Column(String, nullable=False)
    type = Column(String, nullable=False)  # Full-time / Part-time / Contract
    status = Column(String, nullable=False, default="draft")  # draft / published / closed
    description = Column(Text, nullable=True)

    # JSON text columns
    requirements = Column(Text, nullable=True)  # list
    responsibilities = Column(Text, nullable=True)  # list
    deal_breakers = Column(Text, nullable=True, default=DEFAULT_DEAL_BREAKERS)  # object

    # Auto-sourcing
    auto_sourcing_enabled = Column(Boolean, default=False)
    sourcing_threshold = Column(Integer, default=70)

    created_at = Column(DateTime, default=utcnow, index=True)
    updated_at = Column(DateTime, default=utcnow)


class Candidate(Base):
    __tablename__ = "candidates"

    id = Column(String, primary_key=True, default=new_id)
    job_id = Column(String, ForeignKey("jobs.id", ondelete="SET NULL"), nullable=True, index=True)

    # Contact & Personal (email is deliberately not unique)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, index=True)
    phone = Column(String, nullable=True)
    role = Column(String, nullable=False)
    location = Column(String, nullable=True)

    # Loosely typed JSON text: skills is a list, experience/education may be
    # a list, an object or plain prose
    skills = Column(Text, nullable=True)
    experience = Column(Text, nullable=True)
    education = Column(Text, nullable=True)
    years_of_experience = Column(Integer, nullable=True)

    # Pipeline
    stage = Column(String, nullable=False, default="new")
    fit_score = Column(Integer, nullable=True)
    fit_score_breakdown = Column(Text, nullable=True)

    resume_text = Column(Text, nullable=True)
    source = Column(String, default="Direct Application")

    created_at = Column(DateTime, default=utcnow, index=True)
    updated_at = Column(DateTime, default=utcnow)


class Scorecard(Base):
    __tablename__ = "scorecards"

    id = Column(String, primary_key=True, default=new_id)
    candidate_id = Column(String, ForeignKey("candidates.id", ondelete="CASCADE"), nullable=False, index=True)
    job_id = Column(String, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False)
    interviewer_id = Column(String, nullable=True)
    stage = Column(String, nullable=False)
    scores = Column(Text, nullable=True)  # {"competency": rating}
    feedback = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow)


class JobCandidate(Base):
    __tablename__ = "job_candidates"
    __table_args__ = (UniqueConstraint("job_id", "candidate_id", name="uq_job_candidate"),)

    id = Column(String, primary_key=True, default=new_id)
    job_id = Column(String, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False)
    candidate_id = Column(String, ForeignKey("candidates.id", ondelete="CASCADE"), nullable=False)
    match_score = Column(Integer, nullable=True)
    strengths = Column(Text, nullable=True)
    gaps = Column(Text, nullable=True)
    status = Column(String, nullable=False)  # applied / sourced
    created_at = Column(DateTime, default=utcnow)


class Interview(Base):
    __tablename__ = "interviews"

    id = Column(String, primary_key=True, default=new_id)
    candidate_id = Column(String, ForeignKey("candidates.id", ondelete="CASCADE"), nullable=False)
    job_id = Column(String, ForeignKey("jobs.id", ondelete="SET NULL"), nullable=True)
    # ISO-8601 strings as sent by the client
    start_time = Column(String, nullable=False)
    end_time = Column(String, nullable=False)
    video_link = Column(String, nullable=True)
    status = Column(String, nullable=False, default="scheduled")
    created_at = Column(DateTime, default=utcnow)


class Evaluation(Base):
    __tablename__ = "evaluations"

    id = Column(String, primary_key=True, default=new_id)
    interview_id = Column(String, ForeignKey("interviews.id", ondelete="CASCADE"), nullable=False)
    question = Column(Text, nullable=False)
    criterion = Column(String, nullable=False)
    listen_for = Column(Text, nullable=True)
    rating = Column(Integer, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow)


class OutreachEmail(Base):
    __tablename__ = "outreach_emails"

    id = Column(String, primary_key=True, default=new_id)
    candidate_id = Column(String, ForeignKey("candidates.id", ondelete="CASCADE"), nullable=False)
    job_id = Column(String, ForeignKey("jobs.id", ondelete="SET NULL"), nullable=True)
    sequence_day = Column(Integer, nullable=False, default=0)
    subject = Column(String, nullable=False)
    body = Column(Text, nullable=False)
    status = Column(String, nullable=False, default="sent")
    sent_at = Column(DateTime, nullable=True)
    opened_at = Column(DateTime, nullable=True)
    replied_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=utcnow)


class ContactRequest(Base):
    __tablename__ = "contact_requests"

    id = Column(String, primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    company = Column(String, nullable=True)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime, default=utcnow)


class EmailTemplate(Base):
    __tablename__ = "email_templates"

    id = Column(String, primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    subject = Column(String, nullable=False)
    body = Column(Text, nullable=False)
    category = Column(String, nullable=False)
    created_at = Column(DateTime, default=utcnow)


class Settings(Base):
    __tablename__ = "settings"

    id = Column(String, primary_key=True, default=new_id)
    company_name = Column(String, nullable=True)
    website = Column(String, nullable=True)
    auto_reject_threshold = Column(String, nullable=True)
    email_notifications = Column(Boolean, nullable=True)
    updated_at = Column(DateTime, default=utcnow)


class Integration(Base):
    __tablename__ = "integrations"

    id = Column(String, primary_key=True)  # catalog key, e.g. "gmail"
    name = Column(String, nullable=False)
    status = Column(String, nullable=False)  # connected / disconnected
    config = Column(Text, nullable=True)
    updated_at = Column(DateTime, default=utcnow)
