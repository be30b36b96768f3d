from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse

from shortlink_app.dependencies import get_edge_service
from shortlink_app.services.edge_service import EdgeService

router = APIRouter(tags=["redirect"])


async def _redirect(edge: EdgeService, domain: str, key: Optional[str]):
    resolved = await edge.get_domain_or_link(domain, key)

    # A domain without a target has nowhere to send the visitor
    if not resolved or not resolved.url:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Link not found"
        )

    return RedirectResponse(url=resolved.url, status_code=status.HTTP_302_FOUND)


@router.get("/{domain}")
async def redirect_domain(
    domain: str,
    edge: EdgeService = Depends(get_edge_service)
):
    """Redirect a bare domain to its target"""
    return await _redirect(edge, domain, None)


@router.get("/{domain}/{key:path}")
async def redirect_link(
    domain: str,
    key: str,
    edge: EdgeService = Depends(get_edge_service)
):
    """
    Redirect a short link to its destination.

    Password protection, expiry and device/geo targeting are handled by the
    application in front of this router; the raw destination is used here.
    """
    return await _redirect(edge, domain, key)
