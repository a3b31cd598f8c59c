from fastapi import Request

from seat_selector.session import SeatingSession


def get_session(request: Request) -> SeatingSession:
    """The single seating session owned by the application"""
    return request.app.state.session
