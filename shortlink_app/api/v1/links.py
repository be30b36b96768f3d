from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query, status

from shortlink_app.dependencies import get_edge_service
from shortlink_app.exceptions import KeyGenerationError
from shortlink_app.schemas import LinkProps, RootDomainLink
from shortlink_app.services.edge_service import EdgeService

router = APIRouter(prefix="/links", tags=["links"])


@router.get("/resolve", response_model=Union[LinkProps, RootDomainLink])
async def resolve_link(
    domain: str,
    key: Optional[str] = None,
    edge: EdgeService = Depends(get_edge_service)
):
    """Resolve a domain (no key / `_root`) or a link"""
    resolved = await edge.get_domain_or_link(domain, key)
    if not resolved:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Link not found"
        )
    return resolved


@router.get("/exists")
async def key_exists(
    domain: str,
    key: str,
    edge: EdgeService = Depends(get_edge_service)
):
    """Whether `key` is taken on `domain`"""
    return {"exists": bool(await edge.check_if_key_exists(domain, key))}


@router.get("/random-key")
async def random_key(
    domain: str,
    prefix: Optional[str] = None,
    long: bool = Query(False),
    edge: EdgeService = Depends(get_edge_service)
):
    """Generate a key that is free on `domain`"""
    try:
        key = await edge.get_random_key(domain, prefix=prefix, long=long)
    except KeyGenerationError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e)
        )
    return {"domain": domain, "key": key}
