"""
Clean API endpoints.
"""
from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, File, Form, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response

from sheet_cleanup.schemas.clean import CleanOptions, HeadersResponse
from sheet_cleanup.services.clean_service import CleanService, base_filename

router = APIRouter()


def content_disposition(filename: str) -> str:
    """Attachment header; non-ASCII names also get an RFC 5987 filename*."""
    try:
        filename.encode("ascii")
    except UnicodeEncodeError:
        fallback = filename.encode("ascii", "replace").decode("ascii").replace("?", "_")
        return f"attachment; filename={fallback}; filename*=UTF-8''{quote(filename)}"
    return f"attachment; filename={filename}"


@router.post("/clean")
async def clean_file(
    file: UploadFile = File(...),
    columns: str = Form(""),
    trim: Optional[str] = Form(None),
    collapse_spaces: Optional[str] = Form(None, alias="collapseSpaces"),
    text_case: Optional[str] = Form(None, alias="textCase"),
    date_format: Optional[str] = Form(None, alias="dateFormat"),
    dedupe_keys: Optional[str] = Form(None, alias="dedupeKeys"),
    drop_empty_rows: Optional[str] = Form(None, alias="dropEmptyRows"),
    drop_empty_cols: Optional[str] = Form(None, alias="dropEmptyCols"),
    normalize_types: Optional[str] = Form(None, alias="normalizeTypes"),
    validate_email: Optional[str] = Form(None, alias="validateEmail"),
    remove_invalid_emails: Optional[str] = Form(None, alias="removeInvalidEmails"),
    validate_url: Optional[str] = Form(None, alias="validateUrl"),
    remove_invalid_urls: Optional[str] = Form(None, alias="removeInvalidUrls"),
    output_format: Optional[str] = Form(None, alias="outputFormat"),
    keep_order: Optional[str] = Form(None, alias="keepOrder"),
):
    """
    Clean an uploaded CSV/Excel file and return it as CSV or XLSX.

    Only the requested columns are kept, in the requested order. Options
    with unrecognized values fall back to their defaults.
    """
    options = CleanOptions.from_form({
        "columns": columns,
        "trim": trim,
        "collapseSpaces": collapse_spaces,
        "textCase": text_case,
        "dateFormat": date_format,
        "dedupeKeys": dedupe_keys,
        "dropEmptyRows": drop_empty_rows,
        "dropEmptyCols": drop_empty_cols,
        "normalizeTypes": normalize_types,
        "validateEmail": validate_email,
        "removeInvalidEmails": remove_invalid_emails,
        "validateUrl": validate_url,
        "removeInvalidUrls": remove_invalid_urls,
        "outputFormat": output_format,
        "keepOrder": keep_order,
    })

    data = await file.read()
    service = CleanService()
    cleaned = await run_in_threadpool(service.clean_upload, file.filename, data, options)

    return Response(
        content=cleaned.content,
        media_type=cleaned.media_type,
        headers={"Content-Disposition": content_disposition(cleaned.filename)},
    )


@router.post("/headers", response_model=HeadersResponse)
async def read_headers(file: UploadFile = File(...)):
    """Return the header row of an uploaded CSV/Excel file."""
    data = await file.read()
    service = CleanService()
    headers = await run_in_threadpool(service.read_headers, file.filename, data)
    return HeadersResponse(filename=base_filename(file.filename), headers=headers)
