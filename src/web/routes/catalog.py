"""
Routes du catalogue.

CRUD des films, recherche textuelle et filtres genre / décennie.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...services.catalog import CatalogService, EntryValidationError
from ..deps import get_catalog_service
from ..schemas import FacetsOut, MovieIn, MovieOut

router = APIRouter(prefix="/api/movies", tags=["catalog"])

CatalogDep = Annotated[CatalogService, Depends(get_catalog_service)]


@router.get("", response_model=list[MovieOut])
async def list_movies(
    catalog: CatalogDep,
    q: str = "",
    genre: Annotated[Optional[list[str]], Query()] = None,
    decade: Annotated[Optional[list[str]], Query()] = None,
):
    """Liste les films, filtrés par texte, genres et décennies."""
    movies = catalog.search(term=q, genres=genre or [], decades=decade or [])
    return [MovieOut.from_entity(movie) for movie in movies]


@router.get("/facets", response_model=FacetsOut)
async def facets(catalog: CatalogDep):
    """Genres et décennies disponibles pour les filtres."""
    return FacetsOut(
        genres=catalog.available_genres(),
        decades=catalog.available_decades(),
    )


@router.get("/{movie_id}", response_model=MovieOut)
async def get_movie(movie_id: str, catalog: CatalogDep):
    movie = catalog.get(movie_id)
    if movie is None:
        raise HTTPException(status_code=404, detail="Movie not found")
    return MovieOut.from_entity(movie)


@router.post("", response_model=MovieOut, status_code=status.HTTP_201_CREATED)
async def create_movie(payload: MovieIn, catalog: CatalogDep):
    """Ajout manuel d'un film."""
    try:
        movie = catalog.add(payload.to_entity())
    except EntryValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return MovieOut.from_entity(movie)


@router.put("/{movie_id}", response_model=MovieOut)
async def update_movie(movie_id: str, payload: MovieIn, catalog: CatalogDep):
    try:
        movie = catalog.update(movie_id, payload.to_entity())
    except EntryValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if movie is None:
        raise HTTPException(status_code=404, detail="Movie not found")
    return MovieOut.from_entity(movie)


@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_movie(movie_id: str, catalog: CatalogDep):
    if not catalog.delete(movie_id):
        raise HTTPException(status_code=404, detail="Movie not found")
