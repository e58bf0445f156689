# -*- coding: utf-8 -*-
import json
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from hireloop.api import app
from hireloop.core.assistant import HiringAssistant, get_assistant
from hireloop.db.database import get_db, init_db, make_engine
from hireloop.llm.client import LLMClient


class FakeCompletions:
    """
    Stands in for `AsyncOpenAI().chat.completions`. Replies are queued per
    test: dicts are JSON-encoded, strings are returned verbatim and
    exceptions are raised.
    """

    def __init__(self):
        self.replies = []
        self.calls = []

    def queue(self, *replies):
        self.replies.extend(replies)

    async def create(self, **params):
        self.calls.append(params)
        reply = self.replies.pop(0) if self.replies else "{}"
        if isinstance(reply, Exception):
            raise reply
        content = reply if isinstance(reply, str) else json.dumps(reply)
        message = SimpleNamespace(content=content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def engine(tmp_path):
    eng = make_engine(f"sqlite:///{tmp_path / 'hireloop-test.db'}")
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def completions():
    return FakeCompletions()


@pytest.fixture
def llm(completions):
    client = LLMClient(api_key="test-key", model="test-model")
    client._client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return client


@pytest.fixture
def assistant(llm):
    return HiringAssistant(llm)


@pytest.fixture
def client(session_factory, assistant):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_assistant] = lambda: assistant
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_job(client):
    def _make(**overrides):
        payload = {
            "title": "Backend Engineer",
            "department": "Engineering",
            "location": "Remote",
            "type": "Full-time",
            "description": "Build APIs.",
            "requirements": ["Python", "SQL"],
            "responsibilities": ["Ship features"],
        }
        payload.update(overrides)
        resp = client.post("/api/jobs", json=payload)
        assert resp.status_code == 200, resp.text
        return resp.json()

    return _make


@pytest.fixture
def make_candidate(client):
    def _make(**overrides):
        payload = {
            "name": "Ada Lovelace",
            "email": "ada@example.com",
            "role": "Backend Engineer",
            "skills": ["Python"],
            "fit_score": 80,
        }
        payload.update(overrides)
        resp = client.post("/api/candidates", json=payload)
        assert resp.status_code == 200, resp.text
        return resp.json()

    return _make
