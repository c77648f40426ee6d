from __future__ import annotations

from io import BytesIO
from typing import Tuple
import os
import zipfile

import pandas as pd
from docx import Document
from docx.opc.exceptions import PackageNotFoundError
from pypdf import PdfReader
from pypdf.errors import PdfReadError

from rfp_gateway.core.errors import ValidationError


SUPPORTED = {".txt", ".pdf", ".docx", ".csv", ".xlsx"}


def extract_text_from_upload(filename: str, data: bytes, max_bytes: int) -> Tuple[str, str]:
    ext = os.path.splitext((filename or "").lower())[1]

    if ext not in SUPPORTED:
        raise ValidationError(f"Unsupported file type: {ext or 'none'}. Supported: {sorted(SUPPORTED)}")

    if len(data) > max_bytes:
        raise ValidationError(f"File size must be less than {max_bytes // (1024 * 1024)}MB")

    if ext == ".txt":
        return data.decode("utf-8", errors="ignore").strip(), "txt"

    if ext == ".pdf":
        try:
            reader = PdfReader(BytesIO(data))
            pages = [p.extract_text() or "" for p in reader.pages]
        except PdfReadError as e:
            raise ValidationError(f"Could not read PDF: {e}") from e
        return "\n".join(pages).strip(), "pdf"

    if ext == ".docx":
        try:
            doc = Document(BytesIO(data))
        except (PackageNotFoundError, zipfile.BadZipFile, KeyError) as e:
            raise ValidationError(f"Could not read DOCX: {e}") from e
        parts = [p.text for p in doc.paragraphs if p.text and p.text.strip()]
        return "\n".join(parts).strip(), "docx"

    if ext == ".csv":
        try:
            df = pd.read_csv(BytesIO(data))
        except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
            raise ValidationError(f"Could not read CSV: {e}") from e
        return dataframe_to_text(df), "csv"

    try:
        xls = pd.ExcelFile(BytesIO(data))
    except (zipfile.BadZipFile, ValueError) as e:
        raise ValidationError(f"Could not read XLSX: {e}") from e
    chunks = []
    for sheet in xls.sheet_names:
        df = pd.read_excel(xls, sheet_name=sheet)
        chunks.append(f"--- Sheet: {sheet} ---\n{dataframe_to_text(df)}")
    return "\n\n".join(chunks).strip(), "xlsx"


def dataframe_to_text(df: pd.DataFrame, max_rows: int = 200) -> str:
    """Render a bill-of-quantities sheet one line per row for the summarizer.

    Blank rows are dropped and empty cells render as empty strings.
    """
    df = df.dropna(how="all")
    if df.empty:
        return ""

    headers = [str(c).strip() for c in df.columns]
    out = ["COLUMNS: " + " | ".join(headers)]
    for values in df.head(max_rows).fillna("").astype(str).itertuples(index=False):
        out.append("ROW: " + " | ".join(v.strip() for v in values))
    return "\n".join(out)
