from .config import GameConfig, BASE_STRING_LENGTH, QUIT_COMMAND
from .pool import generate_base_string
from .session import GameSession, TurnResult, TurnStatus

__all__ = ["GameConfig", "GameSession", "TurnResult", "TurnStatus",
           "generate_base_string", "BASE_STRING_LENGTH", "QUIT_COMMAND"]
