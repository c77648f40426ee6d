"""Tests for RFP document text extraction."""

from io import BytesIO

import pandas as pd
import pytest
from docx import Document
from pypdf import PdfWriter

from rfp_gateway.core.errors import ValidationError
from rfp_gateway.services.file_extractor import extract_text_from_upload

MB = 1024 * 1024


def _docx_bytes(*paragraphs):
    doc = Document()
    for p in paragraphs:
        doc.add_paragraph(p)
    buf = BytesIO()
    doc.save(buf)
    return buf.getvalue()


def test_txt():
    text, kind = extract_text_from_upload("tender.txt", b"  Supply 20 split ACs  \n", 10 * MB)
    assert (text, kind) == ("Supply 20 split ACs", "txt")


def test_docx():
    data = _docx_bytes("Scope of supply", "", "100 water heaters")
    text, kind = extract_text_from_upload("Tender.DOCX", data, 10 * MB)
    assert kind == "docx"
    assert text == "Scope of supply\n100 water heaters"


def test_csv_rows():
    data = b"item,qty\nRefrigerator,50\nWashing machine,20\n"
    text, kind = extract_text_from_upload("boq.csv", data, 10 * MB)
    assert kind == "csv"
    assert text.splitlines() == [
        "COLUMNS: item | qty",
        "ROW: Refrigerator | 50",
        "ROW: Washing machine | 20",
    ]


def test_csv_blank_rows_and_cells():
    data = b"item,note\nRefrigerator,5-star\n,\nWindow AC,\n"
    text, _ = extract_text_from_upload("boq.csv", data, 10 * MB)
    assert text.splitlines() == ["COLUMNS: item | note", "ROW: Refrigerator | 5-star", "ROW: Window AC | "]


def test_xlsx_renders_each_sheet():
    buf = BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        pd.DataFrame({"item": ["Refrigerator", "Washing machine"], "qty": [50, 20]}).to_excel(
            writer, sheet_name="BOQ", index=False
        )
        pd.DataFrame({"test": ["BEE rating"]}).to_excel(writer, sheet_name="Tests", index=False)

    text, kind = extract_text_from_upload("boq.xlsx", buf.getvalue(), 10 * MB)

    assert kind == "xlsx"
    assert text.splitlines() == [
        "--- Sheet: BOQ ---",
        "COLUMNS: item | qty",
        "ROW: Refrigerator | 50",
        "ROW: Washing machine | 20",
        "",
        "--- Sheet: Tests ---",
        "COLUMNS: test",
        "ROW: BEE rating",
    ]


def test_unsupported_type():
    with pytest.raises(ValidationError):
        extract_text_from_upload("tender.exe", b"MZ", 10 * MB)


def test_too_large():
    with pytest.raises(ValidationError) as exc:
        extract_text_from_upload("tender.txt", b"x" * (MB + 1), MB)
    assert "less than 1MB" in str(exc.value)


def test_endpoint_returns_text(api):
    resp = api.post(
        "/extract-pdf-text",
        files={"file": ("tender.txt", b"Supply of 50 five-star refrigerators", "text/plain")},
    )
    assert resp.status_code == 200
    assert resp.json() == {
        "extractedText": "Supply of 50 five-star refrigerators",
        "fileType": "txt",
        "characters": 36,
    }


def test_endpoint_rejects_pdf_without_text(api):
    writer = PdfWriter()
    writer.add_blank_page(width=72, height=72)
    buf = BytesIO()
    writer.write(buf)

    resp = api.post("/extract-pdf-text", files={"file": ("scan.pdf", buf.getvalue(), "application/pdf")})

    assert resp.status_code == 500
    assert "Could not extract readable text" in resp.json()["error"]
