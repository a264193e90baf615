"""
FastAPI Web Application - Review Compass Backend
=================================================

REST backend that stores clients and review requests, plus outreach
endpoints and an operator dashboard. The JSON routes under /api are the
ones ReviewApiClient talks to.
"""

import io
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
from urllib.parse import quote

import pandas as pd
from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import HTMLResponse, RedirectResponse

from ..application import OutreachService
from ..domain.composer import compose_request
from ..domain.errors import (
    ClientNotFoundError,
    DispatchError,
    IncompleteSelectionError,
    InvalidStatusTransition,
)
from ..domain.history import ready_for_outreach
from ..domain.models import RequestStatus
from ..domain.platforms import list_platforms
from ..domain.stats import request_stats
from ..infrastructure.config import get_settings
from ..infrastructure.importer import ExcelParser
from ..infrastructure.persistence import Database, DatabaseGateway, init_database
from .pages import render_dashboard
from .schemas import ClientCreate, OutreachSend, ReviewRequestCreate, StatusUpdate

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# ── Globals ────────────────────────────────────────────────────────
db: Optional[Database] = None

IMPORT_EXTENSIONS = ['.xlsx', '.xls', '.csv']


# ── Lifespan ───────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    global db
    settings = get_settings()
    for issue in settings.validate():
        logger.warning(issue)
    db = init_database(str(settings.database_file))
    logger.info("Database ready")
    yield


app = FastAPI(title="Review Compass", description="Review request targeting and tracking", lifespan=lifespan)


def _service() -> OutreachService:
    """Fresh service per request; it reads the store on every call."""
    settings = get_settings()
    gateway = DatabaseGateway(db, link_base=settings.review.link_base)
    return OutreachService(
        gateway,
        industry=settings.business.rule_industry,
        business_name=settings.business.display_name,
    )


def _redirect(message: str) -> RedirectResponse:
    return RedirectResponse(url=f"/?message={quote(message)}", status_code=303)


def _recommendation_payload(service: OutreachService, history) -> dict:
    rec = service.recommend_for(history)
    suggested = history.suggested_platform
    return {
        "client": history.client.to_dict(),
        "availablePlatforms": [p.to_dict() for p in history.available_platforms],
        "reviewHistory": [r.to_dict() for r in history.requests],
        "suggestedPlatform": suggested.to_dict() if suggested else None,
        "recommendedPlatform": rec.platform.to_dict() if rec.platform else None,
        "recommendedAvailable": rec.available,
    }


# ── Clients ────────────────────────────────────────────────────────

@app.get("/api/clients")
async def api_list_clients():
    return [c.to_dict() for c in db.get_all_clients()]


@app.post("/api/clients", status_code=201)
async def api_create_client(body: ClientCreate):
    client_id = db.add_client(name=body.name, email=body.email, phone=body.phone)
    return db.get_client(client_id).to_dict()


def _parse_upload(filename: str, content: bytes) -> list:
    ext = Path(filename).suffix.lower()
    if ext not in IMPORT_EXTENSIONS:
        raise ValueError("Invalid file type. Use .xlsx, .xls, or .csv")

    buffer = io.BytesIO(content)
    if ext == '.csv':
        df = pd.read_csv(buffer, dtype=str)
    else:
        df = pd.read_excel(buffer, sheet_name=0, dtype=str)

    clients, _ = ExcelParser().parse_frame(df)
    if not clients:
        raise ValueError("No valid clients found in file")
    return clients


@app.post("/api/clients/import")
async def api_import_clients(file: UploadFile = File(...)):
    if not file.filename:
        raise HTTPException(status_code=400, detail="No file selected")
    try:
        clients = _parse_upload(file.filename, await file.read())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return db.bulk_add_clients(clients)


@app.post("/import/clients")
async def import_clients_form(file: UploadFile = File(...)):
    """Dashboard upload: same as /api/clients/import, answers with a redirect."""
    if not file.filename:
        return _redirect("No file selected")
    try:
        clients = _parse_upload(file.filename, await file.read())
    except ValueError as e:
        return _redirect(str(e))
    except Exception as e:
        logger.exception(f"Client import error: {e}")
        return _redirect(f"Import failed: {str(e)[:80]}")

    result = db.bulk_add_clients(clients)
    return _redirect(f"Imported {result['added']} clients!")


# ── Review Requests ────────────────────────────────────────────────

@app.get("/api/review-requests")
async def api_list_review_requests():
    return [r.to_dict() for r in db.get_all_review_requests()]


@app.get("/api/review-requests/stats")
async def api_review_request_stats():
    return _service().stats().to_dict()


@app.post("/api/review-requests", status_code=201)
async def api_create_review_request(body: ReviewRequestCreate):
    """Store a request. A blank customMessage gets the default template."""
    settings = get_settings()
    client = db.get_client(body.client_id) if body.client_id is not None else None
    if body.client_id is not None and client is None:
        raise HTTPException(status_code=404, detail=f"Client not found: {body.client_id}")

    try:
        draft = compose_request(
            client,
            body.platform,
            override_message=body.custom_message,
            business_name=settings.business.display_name,
        )
    except IncompleteSelectionError as e:
        raise HTTPException(status_code=400, detail=str(e))

    gateway = DatabaseGateway(db, link_base=settings.review.link_base)
    try:
        created = gateway.create_review_request(draft)
    except DispatchError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return created.to_dict()


@app.patch("/api/review-requests/{request_id}/status")
async def api_update_review_request_status(request_id: int, body: StatusUpdate):
    valid = {s.value for s in RequestStatus}
    if body.status not in valid:
        raise HTTPException(status_code=400, detail=f"Unknown status: {body.status}")
    try:
        updated = db.update_request_status(request_id, body.status)
    except InvalidStatusTransition as e:
        raise HTTPException(status_code=409, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=404, detail=f"Review request not found: {request_id}")
    return updated.to_dict()


# ── Outreach ───────────────────────────────────────────────────────

@app.get("/api/platforms")
async def api_list_platforms():
    return [p.to_dict() for p in list_platforms()]


@app.get("/api/outreach")
async def api_outreach():
    """Clients that still have platforms left, with suggestion and recommendation."""
    service = _service()
    return [_recommendation_payload(service, h) for h in service.ready_clients()]


@app.get("/api/clients/{client_id}/recommendation")
async def api_client_recommendation(client_id: int):
    service = _service()
    try:
        history = service.client_history(client_id)
    except ClientNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _recommendation_payload(service, history)


@app.post("/api/outreach/send", status_code=201)
async def api_outreach_send(body: OutreachSend):
    try:
        created = _service().send_request(body.client_id, body.platform, body.message)
    except IncompleteSelectionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ClientNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DispatchError as e:
        raise HTTPException(status_code=502, detail=f"Dispatch failed: {e}")
    return created.to_dict()


@app.post("/outreach/send")
async def outreach_send_form(
    client_id: Optional[int] = Form(None),
    platform: str = Form(""),
    message: str = Form(""),
):
    try:
        created = _service().send_request(client_id, platform, message)
    except (IncompleteSelectionError, ClientNotFoundError) as e:
        return _redirect(str(e))
    except DispatchError as e:
        return _redirect(f"Review request failed: {e}")
    return _redirect(f"Review request sent to {created.client_name}!")


# ── Dashboard ──────────────────────────────────────────────────────

@app.get("/", response_class=HTMLResponse)
async def dashboard(message: str = ""):
    service = _service()
    clients, requests = service.snapshot()
    ready = [(h, service.recommend_for(h)) for h in ready_for_outreach(clients, requests, service.platforms)]
    return render_dashboard(
        stats=request_stats(requests),
        ready=ready,
        requests=requests,
        platforms=service.platforms,
        business_name=get_settings().business.display_name or "",
        message=message,
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
