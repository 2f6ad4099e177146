"""Peak Routes - create, list, update coordinates and delete catalog entries.

Invariants:
    - Routes never contain filtering or validation rules (delegate to core/)
    - Index endpoints address the CURRENT position; indices shift after deletes
    - /peaks/by-id/{peak_id} endpoints address the stable id
    - Create: height parsed before validation; update: coordinates validated
      before the existence check
    - Repository obtained via Depends(get_peak_repository) so tests can swap it
"""

from fastapi import APIRouter, Depends, Query, Response, status

from peaks.config import Settings, get_settings
from peaks.core.domain_types import PeakId, SortField
from peaks.core.errors import ErrorContext, PeakNotFoundError, PeakValidationError
from peaks.core.peak import Peak
from peaks.core.query_peaks import PeakQuery
from peaks.core.repository_protocols import PeakRepository
from peaks.core.validate_peak import parse_height, validate_coordinates, validate_peak
from peaks.infrastructure.peak_repository import get_peak_repository
from peaks.schemas.peak import CoordinatesUpdate, PeakCreate, PeakResponse

router = APIRouter(prefix="/peaks", tags=["peaks"])


def _found_or_404(peak: Peak | None, context: ErrorContext) -> PeakResponse:
    if peak is None:
        raise PeakNotFoundError(context)
    return PeakResponse.model_validate(peak)


def _validated_coordinates(body: CoordinatesUpdate) -> str:
    coordinates = body.coordinates or ""
    errors = validate_coordinates(coordinates)
    if errors:
        raise PeakValidationError(errors)
    return coordinates


@router.get("", response_model=list[PeakResponse])
async def list_peaks(
    search: str | None = Query(None),
    country: str | None = Query(None),
    min_height: int | None = Query(None, alias="minHeight"),
    max_height: int | None = Query(None, alias="maxHeight"),
    sort_by: str | None = Query("Name", alias="sortBy"),
    sort_descending: bool = Query(False, alias="sortDescending"),
    page: int = Query(1),
    page_size: int | None = Query(None, alias="pageSize"),
    repository: PeakRepository = Depends(get_peak_repository),
    settings: Settings = Depends(get_settings),
):
    """Search, filter, sort and paginate the catalog."""
    query = PeakQuery(
        search=search,
        country=country,
        min_height=min_height,
        max_height=max_height,
        sort_by=SortField.parse(sort_by),
        sort_descending=sort_descending,
        page=page,
        page_size=settings.default_page_size if page_size is None else page_size,
    )
    return [PeakResponse.model_validate(p) for p in repository.query(query)]


@router.post(
    "", response_model=PeakResponse, status_code=status.HTTP_201_CREATED,
)
async def create_peak(
    body: PeakCreate,
    response: Response,
    repository: PeakRepository = Depends(get_peak_repository),
):
    """Validate and append a new peak."""
    peak = Peak(
        name=body.name,
        country=body.country,
        height=parse_height(body.height),
        coordinates=body.coordinates or "",
    )
    errors = validate_peak(peak)
    if errors:
        raise PeakValidationError(errors)

    index = repository.add(peak)
    response.headers["Location"] = f"/peaks/{index}"
    return PeakResponse.model_validate(peak)


@router.get("/{index}", response_model=PeakResponse)
async def get_peak(
    index: int,
    repository: PeakRepository = Depends(get_peak_repository),
):
    """Peak at the current position."""
    return _found_or_404(
        repository.get_by_index(index), ErrorContext(index=index),
    )


@router.put("/{index}", response_model=PeakResponse)
async def update_peak_coordinates(
    index: int,
    body: CoordinatesUpdate,
    repository: PeakRepository = Depends(get_peak_repository),
):
    """Replace the coordinates of the peak at the current position."""
    coordinates = _validated_coordinates(body)
    return _found_or_404(
        repository.update_coordinates(index, coordinates),
        ErrorContext(index=index),
    )


@router.delete("/{index}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_peak(
    index: int,
    repository: PeakRepository = Depends(get_peak_repository),
):
    """Remove the peak at the current position; later peaks shift down."""
    if not repository.remove(index):
        raise PeakNotFoundError(ErrorContext(index=index))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ─── Stable-id endpoints ────────────────────────────────────────

@router.get("/by-id/{peak_id}", response_model=PeakResponse)
async def get_peak_by_id(
    peak_id: int,
    repository: PeakRepository = Depends(get_peak_repository),
):
    return _found_or_404(
        repository.get_by_id(PeakId(peak_id)), ErrorContext(peak_id=peak_id),
    )


@router.put("/by-id/{peak_id}", response_model=PeakResponse)
async def update_peak_coordinates_by_id(
    peak_id: int,
    body: CoordinatesUpdate,
    repository: PeakRepository = Depends(get_peak_repository),
):
    coordinates = _validated_coordinates(body)
    return _found_or_404(
        repository.update_coordinates_by_id(PeakId(peak_id), coordinates),
        ErrorContext(peak_id=peak_id),
    )


@router.delete("/by-id/{peak_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_peak_by_id(
    peak_id: int,
    repository: PeakRepository = Depends(get_peak_repository),
):
    if not repository.remove_by_id(PeakId(peak_id)):
        raise PeakNotFoundError(ErrorContext(peak_id=peak_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
