# routers/dashboard.py
from fastapi import APIRouter, Query

from core.config import DEFAULT_PAGE_SIZE, TYPE_FILTER_ALL
from services.dashboard_service import build_dashboard
from services.incidents_service import load_incidents

router = APIRouter(tags=["dashboard"])

@router.get("/dashboard")
def dashboard(type: str = Query(TYPE_FILTER_ALL, description="incident type, or 'All'"),
              page: int = Query(1, ge=1),
              page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=200)):
    feed = load_incidents()
    return build_dashboard(feed, selected=type, page=page, page_size=page_size)
