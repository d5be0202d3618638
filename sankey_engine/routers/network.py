"""
FastAPI router for building networks from transfer CSVs and inspecting flows.
"""
from fastapi import APIRouter, File, HTTPException, UploadFile

from ..graph.builder import build_network_from_csv
from ..inspection import summarize_category, summarize_flow
from ..models import (
    CategoryInspectionRequest, CategorySummary, FlowInspectionRequest, FlowSummary, NetworkData
)

router = APIRouter()


@router.post("/network/from-csv", response_model=NetworkData)
async def network_from_csv(file: UploadFile = File(...)):
    """
    Upload a CSV of transfers (player_name, from_club, to_club, fee, date, ...).
    Returns the club network the transform endpoints accept.
    """
    if not file.filename or not file.filename.endswith(".csv"):
        raise HTTPException(status_code=400, detail="Only CSV files are supported.")

    content = await file.read()
    if len(content) == 0:
        raise HTTPException(status_code=400, detail="Uploaded file is empty.")

    try:
        return build_network_from_csv(content)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/inspect/flow", response_model=FlowSummary)
def inspect_flow(request: FlowInspectionRequest):
    summary = summarize_flow(request.network, request.source, request.target, request.level)
    if summary is None:
        raise HTTPException(
            status_code=404,
            detail=f"No transfers from {request.source} to {request.target} at {request.level.value} level",
        )
    return summary


@router.post("/inspect/category", response_model=CategorySummary)
def inspect_category(request: CategoryInspectionRequest):
    summary = summarize_category(request.network, request.category, request.level)
    if summary is None:
        raise HTTPException(
            status_code=404,
            detail=f"No clubs in {request.category} at {request.level.value} level",
        )
    return summary
