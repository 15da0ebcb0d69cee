"""
Route d'import en masse depuis un fichier CSV téléversé.

Le type MIME déclaré par le client doit être exactement text/csv;
sinon le fichier est refusé (415) sans être parsé.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, UploadFile

from ...services.catalog_importer import (
    CatalogImportService,
    ImportAbortedError,
    UnsupportedFileTypeError,
)
from ...utils.constants import CSV_MIME_TYPE
from ..deps import get_error_preview, get_import_service
from ..schemas import ImportSummaryOut

router = APIRouter(prefix="/api/imports", tags=["import"])


@router.post("", response_model=ImportSummaryOut)
async def import_csv(
    file: UploadFile,
    importer: Annotated[CatalogImportService, Depends(get_import_service)],
    error_preview: Annotated[int, Depends(get_error_preview)],
):
    """Importe les films d'un export CSV et retourne le résumé."""
    try:
        if file.content_type != CSV_MIME_TYPE:
            raise UnsupportedFileTypeError(file.content_type)
        data = await file.read()
        report = await importer.import_bytes(data, file.content_type)
    except UnsupportedFileTypeError as e:
        raise HTTPException(status_code=415, detail=str(e))
    except ImportAbortedError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return ImportSummaryOut(
        **report.summary(limit=error_preview).to_dict(),
        skipped_lines=report.skipped_lines,
    )
