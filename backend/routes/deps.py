"""Request-scoped accessors for app-lifetime components."""

from fastapi import Request

from services.sportradar import SportradarClient


def get_sportradar(request: Request) -> SportradarClient:
    return request.app.state.sportradar
