"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, Response, status

if TYPE_CHECKING:
    from hydration_tracker.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/export", dependencies=[Depends(require_admin)])
async def export_data(request: Request) -> Response:
    """Return all intakes and settings as a JSON document."""
    container: AppContainer = request.app.state.container
    return Response(
        content=container.export_service.export_data(),
        media_type="application/json",
    )


@router.post("/reset", dependencies=[Depends(require_admin)])
async def reset_data(request: Request) -> dict[str, str]:
    """Remove all intakes and restore default settings."""
    container: AppContainer = request.app.state.container
    container.export_service.clear_all_data()
    return {"status": "ok"}
