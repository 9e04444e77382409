from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, field_validator

from sudoku_csp import UnsolvablePuzzleError, available_strategies, solve_with_stats
from sudoku_csp.config import DEFAULT_STRATEGY
from sudoku_csp.errors import ERROR_STATUS_CODES
from sudoku_csp.logging_utils import get_logger
from sudoku_csp.postprocess.render_result import build_result

logger = get_logger()

app = FastAPI()


class SolveRequest(BaseModel):
    board: list[list[int]]  # 9x9, 0 = blank
    strategy: str = DEFAULT_STRATEGY

    @field_validator("board")
    @classmethod
    def check_board(cls, board: list[list[int]]) -> list[list[int]]:
        if len(board) != 9 or any(len(row) != 9 for row in board):
            raise ValueError("board must be 9x9")
        if any(v < 0 or v > 9 for row in board for v in row):
            raise ValueError("board values must be in 0..9")
        return board


@app.get("/api/health")
async def api_health():
    return {"status": "ok", "strategies": available_strategies()}


@app.post("/api/solve")
def api_solve(request: SolveRequest):
    """
    Solver API endpoint.
    Receives a 9x9 board (0 = blank) and returns the solved board with search stats.
    """
    try:
        solved, stats = solve_with_stats(request.board, strategy=request.strategy)
    except UnsolvablePuzzleError as e:
        raise HTTPException(status_code=ERROR_STATUS_CODES[UnsolvablePuzzleError], detail=str(e))
    except ValueError as e:
        logger.warning("Bad solve request: %s", e)
        raise HTTPException(status_code=ERROR_STATUS_CODES[ValueError], detail=str(e))

    return build_result(request.board, solved, stats)
