# routers/map_view.py
from fastapi import APIRouter

from models.incidents import MapView
from services.incidents_service import load_reports
from services.map_service import build_map

router = APIRouter(tags=["map"])

@router.get("/map", response_model=MapView)
def incident_map():
    return build_map(load_reports())
