# -*- coding: utf-8 -*-
import io
import logging
from pathlib import Path
from typing import List, Optional

from hireloop.config import UploadConfig

logger = logging.getLogger("hireloop.extractors")


class UnsupportedFileError(ValueError):
    pass


def extract_text_from_pdf(data: bytes) -> str:
    from pdfminer.high_level import extract_text
    try:
        return extract_text(io.BytesIO(data)) or ""
    except Exception as e:
        logger.warning(f"PDF text extraction failed: {e}")
        return ""


def extract_text_from_docx(data: bytes) -> str:
    from docx import Document
    try:
        doc = Document(io.BytesIO(data))
        parts: List[str] = []
        for p in doc.paragraphs:
            if p.text:
                parts.append(p.text)
        for tbl in doc.tables:
            for row in tbl.rows:
                for cell in row.cells:
                    txt = (cell.text or "").strip()
                    if txt:
                        parts.append(txt)
        return "\n".join(parts)
    except Exception as e:
        logger.warning(f"DOCX text extraction failed: {e}")
        return ""


def extract_text_from_txt(data: bytes) -> str:
    return data.decode("utf-8", errors="ignore")


def extract_upload_text(data: bytes, filename: Optional[str] = None, content_type: Optional[str] = None) -> str:
    """
    Resume bytes -> text. PDF and DOCX are detected by extension or content
    type; everything else is read as UTF-8 text.
    """
    suf = Path(filename or "").suffix.lower()
    ctype = (content_type or "").lower()

    if suf == ".pdf" or ctype == "application/pdf" or data[:5] == b"%PDF-":
        return extract_text_from_pdf(data)
    if suf == ".docx" or "wordprocessingml" in ctype:
        return extract_text_from_docx(data)
    if suf in (".doc", ".png", ".jpg", ".jpeg", ".zip"):
        raise UnsupportedFileError(f"Unsupported file type: {suf}. Upload a .pdf, .docx or plain text file.")
    return extract_text_from_txt(data)


def truncate_resume_text(text: str, limit: int = UploadConfig.MAX_RESUME_CHARS) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + UploadConfig.TRUNCATION_NOTICE
