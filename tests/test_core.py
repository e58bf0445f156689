# -*- coding: utf-8 -*-
import asyncio
import io

import pytest

from hireloop.catalog.catalog_loader import IntegrationItem, load_integration_catalog, merge_with_stored
from hireloop.core.metrics import health_metrics, health_score, health_status, stage_counts
from hireloop.core.serialization import dump_list, dump_loose, dump_object, parse_list, parse_loose, parse_object
from hireloop.io.extractors import UnsupportedFileError, extract_upload_text, truncate_resume_text
from hireloop.llm.client import LLMClient, LLMError, LLMResponseError


@pytest.mark.parametrize("total, score, status", [
    (0, 0, "critical"),
    (11, 37, "critical"),
    (12, 40, "at-risk"),
    (21, 70, "healthy"),
    (30, 100, "healthy"),
    (75, 100, "healthy"),
])
def test_health_metrics(total, score, status):
    assert health_score(total) == score
    assert health_status(score) == status
    assert health_metrics(total)["status"] == status


def test_stage_counts_includes_every_stage():
    counts = stage_counts(["new", "new", "offer", "archived"])
    assert counts["new"] == 2
    assert counts["offer"] == 1
    assert counts["hired"] == 0
    assert counts["total"] == 4
    assert "archived" not in counts


def test_json_column_helpers():
    assert dump_list(None) == "[]"
    assert parse_list(dump_list(["a", "b"])) == ["a", "b"]
    assert parse_list("not json") == []
    assert parse_list('{"a": 1}') == []

    assert dump_object(None) is None
    assert dump_object('{"x": true}') == '{"x": true}'
    assert parse_object(dump_object({"x": True})) == {"x": True}
    assert parse_object("[1, 2]") is None

    assert dump_loose("Plain prose") == "Plain prose"
    assert parse_loose("Plain prose") == "Plain prose"
    assert parse_loose(dump_loose([{"company": "Acme"}])) == [{"company": "Acme"}]
    assert parse_loose("") == ""


def test_extract_upload_text_plain_and_rejected():
    assert extract_upload_text("Ünïcode resume".encode("utf-8"), "cv.txt", "text/plain") == "Ünïcode resume"
    assert extract_upload_text(b"no extension", None, None) == "no extension"
    for name in ("cv.doc", "cv.png", "cv.JPG", "cv.zip"):
        with pytest.raises(UnsupportedFileError):
            extract_upload_text(b"data", name, None)


def test_extract_docx_text():
    from docx import Document

    doc = Document()
    doc.add_paragraph("Jane Doe")
    doc.add_paragraph("Senior Engineer")
    buf = io.BytesIO()
    doc.save(buf)

    text = extract_upload_text(buf.getvalue(), "jane.docx", None)
    assert "Jane Doe" in text
    assert "Senior Engineer" in text


def test_truncate_resume_text():
    assert truncate_resume_text("short") == "short"
    assert truncate_resume_text("x" * 50000) == "x" * 50000
    out = truncate_resume_text("y" * 50001)
    assert out.startswith("y" * 50000)
    assert out.endswith("Please upload a shorter resume or plain text file.]")
    assert "y" * 50001 not in out


def test_integration_catalog(tmp_path):
    items = load_integration_catalog()
    assert [i.id for i in items] == ["gmail", "slack", "zoom", "gcal"]
    assert items[0].name == "Gmail"

    bad = tmp_path / "integrations.yaml"
    bad.write_text("integrations: [1, 2]\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_integration_catalog(str(bad))

    with pytest.raises(FileNotFoundError):
        load_integration_catalog(str(tmp_path / "missing.yaml"))


def test_merge_with_stored_prefers_stored_status():
    catalog = [IntegrationItem("gmail", "Gmail", "Mail", "email")]
    stored = [
        {"id": "gmail", "name": "Gmail", "status": "connected", "config": {"a": 1}, "updated_at": None},
        {"id": "custom", "name": "Custom", "status": "connected", "config": None, "updated_at": None},
    ]
    merged = merge_with_stored(catalog, stored)

    assert merged[0]["status"] == "connected"
    assert merged[0]["config"] == {"a": 1}
    assert merged[0]["description"] == "Mail"
    assert merged[1]["id"] == "custom"
    assert merged[1]["category"] == "other"


def test_llm_client_without_key_raises():
    client = LLMClient(api_key="", model="m")
    assert not client.enabled
    with pytest.raises(LLMError):
        asyncio.run(client.complete_json("sys", "user"))


def test_llm_client_json_mode_and_defaults(llm, completions):
    completions.queue({"ok": True}, "nope", "nope", "")

    assert asyncio.run(llm.complete_json("sys", "user", temperature=0.3)) == {"ok": True}
    call = completions.calls[0]
    assert call["response_format"] == {"type": "json_object"}
    assert call["temperature"] == 0.3
    assert call["model"] == "test-model"

    assert asyncio.run(llm.complete_json("sys", "user", default={})) == {}
    with pytest.raises(LLMResponseError):
        asyncio.run(llm.complete_json("sys", "user"))
    assert asyncio.run(llm.complete_json("sys", "user")) == {}


def test_parse_resume_coerces_fields(assistant, completions):
    completions.queue({
        "name": "Sam",
        "skills": "not a list",
        "experience": "Five years at Initech",
        "yearsOfExperience": "n/a",
    })
    parsed = asyncio.run(assistant.parse_resume("resume"))

    assert parsed["name"] == "Sam"
    assert parsed["email"] is None
    assert parsed["skills"] == []
    assert parsed["experience"] == "Five years at Initech"
    assert parsed["years_of_experience"] == 0
