"""
Route de recherche de métadonnées pour le formulaire d'ajout.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from ...services.lookup import LookupService
from ..deps import get_lookup_service
from ..schemas import LookupOut, MovieOut

router = APIRouter(prefix="/api/lookup", tags=["lookup"])


@router.get("", response_model=LookupOut)
async def lookup(
    q: str,
    service: Annotated[LookupService, Depends(get_lookup_service)],
):
    """Pré-remplit une fiche à partir d'un titre. Ne lève jamais d'erreur de service."""
    result = await service.prefill(q)
    return LookupOut(
        found=result.found,
        movie=MovieOut.from_entity(result.movie) if result.movie else None,
        error=result.error,
    )
