from fastapi import Request
from services import RoundEntryService


def get_service(request: Request) -> RoundEntryService:
    """FastAPI dependency that provides the RoundEntryService."""
    return request.app.state.round_service
