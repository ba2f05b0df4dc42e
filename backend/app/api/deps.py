"""
FastAPI Dependencies
====================

Routes receive the SopSession owned by the application instead of
reaching for module-level state. The session is created in the app
lifespan (see app.main.create_app); tests pass their own session to
create_app.
"""

from typing import Annotated

from fastapi import Depends, Request

from app.services.session import SopSession


def get_session(request: Request) -> SopSession:
    """Return the session created during application startup."""
    return request.app.state.session


SessionDep = Annotated[SopSession, Depends(get_session)]
