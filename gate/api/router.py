from __future__ import annotations

from fastapi import APIRouter

from gate.api.routes import auth, health, puzzle, reward

gate_router = APIRouter()
gate_router.include_router(health.router, tags=["health"])
gate_router.include_router(auth.router, tags=["auth"])
gate_router.include_router(puzzle.router, tags=["puzzle"])
gate_router.include_router(reward.router, tags=["reward"])
