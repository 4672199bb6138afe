"""Liveness and statistics routes."""

from fastapi import APIRouter, Depends, Request

from server.schemas.common import StatsResponse, StatusResponse
from server.services.app_service import AppService

router = APIRouter(tags=["App"])


def get_app_service(request: Request) -> AppService:
    container = request.app.state.container
    return AppService(container.database, container.sessions)


@router.get("/status", response_model=StatusResponse)
def get_status(app_service: AppService = Depends(get_app_service)):
    """
    Report whether Redis and MongoDB are reachable.
    """
    return StatusResponse(**app_service.status())


@router.get("/stats", response_model=StatsResponse)
def get_stats(app_service: AppService = Depends(get_app_service)):
    """
    Report the number of users and files; a count is 0 while MongoDB is down.
    """
    return StatsResponse(**app_service.stats())
