from .config import Settings
from .engine import Engine
from .state import Intent, Snapshot, State, Status

__all__ = ["Engine", "Intent", "Settings", "Snapshot", "State", "Status"]
