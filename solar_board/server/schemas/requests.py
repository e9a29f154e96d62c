"""Pydantic request schemas for API endpoints."""

from pydantic import BaseModel, Field


class CreateBoardRequest(BaseModel):
    """Request to create a new board session."""

    initialAngles: list[int] = Field(  # noqa: N815
        default_factory=lambda: [0, 0, 0],
        min_length=3,
        max_length=3,
        description="Starting own angle of levels 1-3, in degrees (multiples of 45)",
    )
    asteroidRule: bool = Field(  # noqa: N815
        default=False, description="Charge one extra energy to leave an asteroid field"
    )


class RotateRequest(BaseModel):
    """Request to turn one platform."""

    level: int = Field(ge=1, le=3, description="Rotating level (1-3)")
    steps: int = Field(default=-1, description="Sectors to turn; negative is counter-clockwise")


class LaunchProbeRequest(BaseModel):
    """Request to launch a probe onto Earth."""

    ownerId: str = Field(min_length=1, description="Player launching the probe")  # noqa: N815


class MoveProbeRequest(BaseModel):
    """Request to move a probe."""

    disk: str = Field(description="Destination disk (A-E)")
    sector: int = Field(ge=1, le=8, description="Destination absolute sector (1-8)")
    energy: int = Field(ge=0, description="Energy available for the move")
