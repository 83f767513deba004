# school_admin/core/deps.py
from fastapi import Request

from ..services import Services


def get_services(request: Request) -> Services:
    """Services bound to the data source the app was created with."""
    return request.app.state.services
