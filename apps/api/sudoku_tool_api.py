# sudoku_tool_api.py
# FastAPI wrapper for the tool functions.
# Run from the repo root with: uvicorn apps.api.sudoku_tool_api:app --reload
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from notesolver.config import SolverConfig, TECHNIQUES
from notesolver.errors import ConfigError, GridError
from notesolver.sudoku_tools import compute_candidates_tool, sanity_check, set_cell_tool, solve_tool

app = FastAPI(title="Sudoku Notes Solver API")


class ValuesModel(BaseModel):
    values: List[Optional[int]]


class SanityRequest(BaseModel):
    current: List[Optional[int]]
    original: Optional[List[Optional[int]]] = None


class SetCellRequest(BaseModel):
    values: List[Optional[int]]
    index: int
    value: Optional[int] = None


class SolveRequest(BaseModel):
    values: List[Optional[int]]
    techniques: List[str] = list(TECHNIQUES)
    locked_multiple_size: int = 2
    record_moves: bool = True


def _bad_request(exc: Exception) -> HTTPException:
    return HTTPException(status_code=400, detail=str(exc))


@app.post("/sanity_check")
def api_sanity(req: SanityRequest) -> Dict:
    try:
        return sanity_check(req.current, req.original)
    except GridError as exc:
        raise _bad_request(exc) from exc


@app.post("/compute_candidates")
def api_cands(req: ValuesModel) -> Dict:
    try:
        return compute_candidates_tool(req.values)
    except GridError as exc:
        raise _bad_request(exc) from exc


@app.post("/set_cell")
def api_set_cell(req: SetCellRequest) -> Dict:
    try:
        return set_cell_tool(req.values, req.index, req.value)
    except GridError as exc:
        raise _bad_request(exc) from exc


@app.post("/solve")
def api_solve(req: SolveRequest) -> Dict:
    try:
        config = SolverConfig.from_mapping(
            {
                "techniques": req.techniques,
                "locked_multiple_size": req.locked_multiple_size,
                "record_moves": req.record_moves,
            }
        )
        return solve_tool(req.values, config)
    except (GridError, ConfigError) as exc:
        raise _bad_request(exc) from exc
