from typing import Dict


def init_metrics() -> Dict[str, int | float]:
    return {
        'rooms_carved': 0,
        'walls_knocked_down': 0,
        'max_depth': 0,
        'runtime_ms': 0.0,
    }
