"""FastAPI server for the solar board.

Provides an HTTP API for presentation layers: rotate platforms, locate
catalog objects, query probe reachability and commit probe moves.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from ..engine.resolver import is_visible
from ..models.position import Position
from ..utils.serialization import (
    serialize_position,
    serialize_probe,
    serialize_reachability,
    serialize_rotation,
    serialize_shift,
)
from .schemas.requests import (
    CreateBoardRequest,
    LaunchProbeRequest,
    MoveProbeRequest,
    RotateRequest,
)
from .schemas.responses import (
    BoardStateResponse,
    CreateBoardResponse,
    LocateResponse,
    ProbeResponse,
    ReachableResponse,
    RotationResponse,
)
from .session import BoardSession, BoardSessionManager

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Global session manager
sessions = BoardSessionManager()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown."""
    logger.info("Solar board server starting...")
    yield
    logger.info("Solar board server shutting down...")
    sessions.cleanup_all()


app = FastAPI(
    title="Solar Board API",
    description="Rotation-aware positions and probe reachability on the solar board",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _get_session(board_id: str) -> BoardSession:
    session = sessions.get(board_id)
    if not session:
        raise HTTPException(status_code=404, detail="Board not found")
    return session


def _position(disk: str, sector: int) -> Position:
    try:
        return Position(disk=disk, sector=sector)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


# ============================================
# API ENDPOINTS
# ============================================


@app.get("/api")
async def api_root():
    """API root endpoint - server health check."""
    return {
        "service": "Solar Board",
        "status": "operational",
        "activeBoards": len(sessions.sessions),
    }


@app.post("/api/boards", response_model=CreateBoardResponse)
async def create_board(request: CreateBoardRequest):
    """Create a new board session on the standard board.

    Example:
        POST /api/boards
        {"initialAngles": [0, -45, 90], "asteroidRule": true}
    """
    try:
        session = sessions.create_session(
            initial_angles=tuple(request.initialAngles),
            asteroid_rule=request.asteroidRule,
        )
    except ValueError as e:
        logger.warning(f"Rejected board creation: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return CreateBoardResponse(
        boardId=session.id,
        state=BoardStateResponse(**session.get_state()),
    )


@app.get("/api/boards/{board_id}/state", response_model=BoardStateResponse)
async def get_board_state(board_id: str):
    """Get the current rotation, probes, object positions and cells."""
    session = _get_session(board_id)
    async with session.lock:
        return BoardStateResponse(**session.get_state())


@app.post("/api/boards/{board_id}/rotate", response_model=RotationResponse)
async def rotate(board_id: str, request: RotateRequest):
    """Turn one platform; platforms mounted on it turn with it.

    Example:
        POST /api/boards/board-abc123/rotate
        {"level": 1, "steps": -1}
    """
    session = _get_session(board_id)
    async with session.lock:
        shifts = session.system.rotate(request.level, request.steps)
        return RotationResponse(
            rotation=serialize_rotation(session.system.rotation),
            shifts=[serialize_shift(s) for s in shifts],
        )


@app.post("/api/boards/{board_id}/rotate/next", response_model=RotationResponse)
async def rotate_next(board_id: str):
    """Perform the standard game rotation on the next platform in turn."""
    session = _get_session(board_id)
    async with session.lock:
        _, shifts = session.system.rotate_next()
        return RotationResponse(
            rotation=serialize_rotation(session.system.rotation),
            shifts=[serialize_shift(s) for s in shifts],
        )


@app.post("/api/boards/{board_id}/levels/{level}/reset", response_model=RotationResponse)
async def reset_level(board_id: str, level: int):
    """Return one platform's own angle to its initial value."""
    session = _get_session(board_id)
    async with session.lock:
        try:
            shifts = session.system.reset(level)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return RotationResponse(
            rotation=serialize_rotation(session.system.rotation),
            shifts=[serialize_shift(s) for s in shifts],
        )


@app.get("/api/boards/{board_id}/objects/{object_id}", response_model=LocateResponse)
async def locate_object(board_id: str, object_id: str):
    """Get the current absolute position of a catalog object."""
    session = _get_session(board_id)
    async with session.lock:
        position = session.system.locate_object(object_id)
        if position is None:
            raise HTTPException(status_code=404, detail=f"Object {object_id} not found")
        return LocateResponse(
            objectId=object_id,
            position=serialize_position(position),
            visible=is_visible(session.system.board, session.system.rotation, object_id),
        )


@app.get("/api/boards/{board_id}/reachable", response_model=ReachableResponse)
async def reachable(board_id: str, disk: str, sector: int, energy: int):
    """Cells reachable from a start cell with an energy budget.

    Example:
        GET /api/boards/board-abc123/reachable?disk=A&sector=2&energy=3
    """
    session = _get_session(board_id)
    start = _position(disk, sector)
    async with session.lock:
        try:
            cells = session.system.reachable_cells(start, energy)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return ReachableResponse(
            start=start.key, energy=energy, cells=serialize_reachability(cells)
        )


@app.post("/api/boards/{board_id}/probes", response_model=ProbeResponse)
async def launch_probe(board_id: str, request: LaunchProbeRequest):
    """Launch a probe onto Earth's current cell."""
    session = _get_session(board_id)
    async with session.lock:
        try:
            probe = session.system.launch_probe(request.ownerId)
        except ValueError as e:
            logger.warning(f"Board {board_id}: launch rejected: {e}")
            raise HTTPException(status_code=400, detail=str(e))
        return ProbeResponse(probe=serialize_probe(probe))


@app.post("/api/boards/{board_id}/probes/{probe_id}/move", response_model=ProbeResponse)
async def move_probe(board_id: str, probe_id: str, request: MoveProbeRequest):
    """Move a probe to a cell reachable with the given energy.

    Example:
        POST /api/boards/board-abc123/probes/p1-probe-001/move
        {"disk": "B", "sector": 2, "energy": 2}
    """
    session = _get_session(board_id)
    destination = _position(request.disk, request.sector)
    async with session.lock:
        if session.system.probes.get(probe_id) is None:
            raise HTTPException(status_code=404, detail=f"Probe {probe_id} not found")
        try:
            entry = session.system.move_probe(probe_id, destination, request.energy)
        except ValueError as e:
            logger.warning(f"Board {board_id}: move rejected: {e}")
            raise HTTPException(status_code=400, detail=str(e))
        return ProbeResponse(
            probe=serialize_probe(session.system.probes.get(probe_id)),
            movements=entry.movements,
            path=entry.path,
        )


@app.delete("/api/boards/{board_id}")
async def delete_board(board_id: str):
    """Delete a board session."""
    if sessions.delete(board_id):
        return {"message": f"Board {board_id} deleted"}
    else:
        raise HTTPException(status_code=404, detail="Board not found")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
