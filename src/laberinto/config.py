from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class PlanConfig:
    rows: int = 6
    cols: int = 6
    seed: str = "aula1"
    extra_walls: int = 0
    # The classroom slider tops out here; the engine itself has no cap.
    max_extra_walls: int = 60
    # None: use the category of the first labeled cell on the board
    target_category: Optional[str] = None
    target_count: int = 3

# Defaults (tools override fields from their flags)
DEFAULTS = PlanConfig()

def clamp_extra_walls(n: int, cfg: PlanConfig = DEFAULTS) -> int:
    return max(0, min(n, cfg.max_extra_walls))
