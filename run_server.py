#!/usr/bin/env python3
"""Run the solar board API locally (http://127.0.0.1:8045/api)."""

import uvicorn

if __name__ == "__main__":
    # Board events are logged by the app itself; keep uvicorn to warnings
    uvicorn.run(
        "solar_board.server.main:app",
        host="127.0.0.1",
        port=8045,
        reload=True,
        log_level="warning",
    )
