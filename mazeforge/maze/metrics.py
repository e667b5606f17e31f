from typing import Dict


def init_metrics() -> Dict[str, int | float | bool | dict]:
    return {
        'wall_candidates': 0,
        'walls_kept': 0,
        'walls_carved': 0,
        'walls_final': 0,
        'free_cells': 0,
        'free_zones': 0,
        'room_zones': 0,
        'corridor_zones': 0,
        'steps_changed': {},
        'phase_ms': {},
        'runtime_ms': 0.0,
    }
