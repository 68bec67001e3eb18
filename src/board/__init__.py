from src.board.config import BoardConfig, load_config
from src.board.grid import GridBoard, Point, INVALID_POINT
from src.board.layout import GridBoardGenerator
from src.board.search import Search, never_stop

__all__ = [
    "BoardConfig",
    "load_config",
    "GridBoard",
    "Point",
    "INVALID_POINT",
    "GridBoardGenerator",
    "Search",
    "never_stop",
]
