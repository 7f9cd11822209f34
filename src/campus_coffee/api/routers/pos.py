"""
campus_coffee.api.routers.pos

REST endpoints for points of sale.

Responsibilities:
- Validate request bodies (pydantic DTOs) and convert them to `Pos`.
- Call the `PosDataService` port and map its error variants to HTTP statuses.
"""

from __future__ import annotations

from datetime import datetime
from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field
from starlette.status import (
    HTTP_201_CREATED,
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
)

from campus_coffee.api.deps import pos_data_service
from campus_coffee.domain.errors import DuplicatePosName, PosError, PosNotFound
from campus_coffee.domain.models import CampusType, Pos, PosType
from campus_coffee.domain.ports import PosDataService
from campus_coffee.domain.result import Err, Ok
from campus_coffee.observability.logging import get_logger

log = get_logger(__name__)

router = APIRouter(prefix="/api/pos", tags=["pos"])


class PosDto(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    # Read-only on input; filled from the stored record on output.
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    name: str = Field(min_length=1, max_length=255)
    description: str = ""
    type: PosType
    campus: CampusType
    street: str = Field(min_length=1, max_length=255)
    house_number: str = Field(min_length=1, max_length=16)
    postal_code: int = Field(ge=0)
    city: str = Field(min_length=1, max_length=255)

    def to_domain(self, *, id: int | None) -> Pos:
        return Pos(
            id=id,
            name=self.name,
            description=self.description,
            type=self.type,
            campus=self.campus,
            street=self.street,
            house_number=self.house_number,
            postal_code=self.postal_code,
            city=self.city,
        )


def _raise_for(error: PosError) -> NoReturn:
    match error:
        case PosNotFound():
            log.info("pos_not_found", key=error.key)
            raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail=error.message)
        case DuplicatePosName():
            log.warning("pos_duplicate_name", name=error.name)
            raise HTTPException(status_code=HTTP_409_CONFLICT, detail=error.message)


@router.get("", response_model=list[PosDto])
async def list_pos(store: PosDataService = Depends(pos_data_service)) -> list[PosDto]:
    return [PosDto.model_validate(p) for p in await store.get_all()]


@router.get("/filter", response_model=PosDto)
async def filter_pos_by_name(
    name: str = Query(min_length=1),
    store: PosDataService = Depends(pos_data_service),
) -> PosDto:
    match await store.filter_by_name(name):
        case Ok(value=pos):
            return PosDto.model_validate(pos)
        case Err(error=error):
            _raise_for(error)


@router.get("/{pos_id}", response_model=PosDto)
async def get_pos(pos_id: int, store: PosDataService = Depends(pos_data_service)) -> PosDto:
    match await store.get_by_id(pos_id):
        case Ok(value=pos):
            return PosDto.model_validate(pos)
        case Err(error=error):
            _raise_for(error)


@router.post("", response_model=PosDto, status_code=HTTP_201_CREATED)
async def create_pos(body: PosDto, store: PosDataService = Depends(pos_data_service)) -> PosDto:
    if body.id is not None:
        raise HTTPException(
            status_code=HTTP_400_BAD_REQUEST, detail="POS ID must not be set when creating a POS."
        )
    match await store.upsert(body.to_domain(id=None)):
        case Ok(value=pos):
            log.info("pos_created", pos_id=pos.id, name=pos.name)
            return PosDto.model_validate(pos)
        case Err(error=error):
            _raise_for(error)


@router.put("/{pos_id}", response_model=PosDto)
async def update_pos(
    pos_id: int, body: PosDto, store: PosDataService = Depends(pos_data_service)
) -> PosDto:
    if body.id is not None and body.id != pos_id:
        raise HTTPException(
            status_code=HTTP_400_BAD_REQUEST, detail="POS ID in path and body do not match."
        )
    match await store.upsert(body.to_domain(id=pos_id)):
        case Ok(value=pos):
            log.info("pos_updated", pos_id=pos.id, name=pos.name)
            return PosDto.model_validate(pos)
        case Err(error=error):
            _raise_for(error)


# --- Module Notes -----------------------------------------------------------
# No per-record DELETE endpoint; only `PosDataService.clear` removes rows.
