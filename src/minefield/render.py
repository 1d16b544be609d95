"""
Plain-text rendering of a minefield board for terminal front-ends.
"""
from .board import Board
from .cell import FLAGGED_CODE, HIDDEN_CODE, MINE_CODE


def render_board(board: Board, reveal_mines: bool = False) -> str:
    """
    Render board as an ASCII grid with row and column labels.

    Args:
        board: Board to draw.
        reveal_mines: Show every mine, used once the game is over.

    Returns:
        Multi-line string; "." hidden, "F" flagged, "*" mine, " " empty.
    """
    width = board.config.width
    obs = board.get_observation()
    lines = ["    " + " ".join(f"{col % 10}" for col in range(width))]

    for row in range(board.config.height):
        row_str = f"{row:3d} "
        for col in range(width):
            val = obs[row, col]
            cell = board.cells[board.index_of(row, col)]
            if reveal_mines and cell.has_mine and val != FLAGGED_CODE:
                row_str += "*"
            elif val == HIDDEN_CODE:
                row_str += "."
            elif val == FLAGGED_CODE:
                row_str += "F"
            elif val == MINE_CODE:
                row_str += "*"
            elif val == 0:
                row_str += " "
            else:
                row_str += str(val)
            row_str += " "
        lines.append(row_str.rstrip())

    return "\n".join(lines)
