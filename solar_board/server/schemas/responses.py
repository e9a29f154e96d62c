"""Pydantic response schemas for API endpoints."""

from pydantic import BaseModel, Field


class BoardStateResponse(BaseModel):
    """Response containing the current board state."""

    boardId: str  # noqa: N815
    rotation: dict
    probes: list[dict]
    objects: dict[str, dict]
    cells: list[dict]


class CreateBoardResponse(BaseModel):
    """Response after creating a new board session."""

    boardId: str  # noqa: N815
    state: BoardStateResponse


class RotationResponse(BaseModel):
    """Response after a rotation or reset."""

    rotation: dict
    shifts: list[dict] = Field(default_factory=list)


class LocateResponse(BaseModel):
    """Current position of a catalog object."""

    objectId: str  # noqa: N815
    position: dict
    visible: bool


class ReachableResponse(BaseModel):
    """Reachability map for a start cell and energy budget."""

    start: str
    energy: int
    cells: dict[str, dict]


class ProbeResponse(BaseModel):
    """Response after launching or moving a probe."""

    probe: dict
    movements: int | None = None
    path: list[str] = Field(default_factory=list)

