import json
from pathlib import Path

_constants_path = Path(__file__).with_name("constants.json")
with _constants_path.open(encoding="utf-8") as f:
    _cfg = json.load(f)

FULL_TURN_TOLERANCE: float = float(_cfg["FULL_TURN_TOLERANCE"])
DEFAULT_ANGLE_UNIT: str = str(_cfg["DEFAULT_ANGLE_UNIT"])
DEFAULT_PRECISION: str = str(_cfg["DEFAULT_PRECISION"])
DEFAULT_RESOLUTION_MODE: str = str(_cfg["DEFAULT_RESOLUTION_MODE"])
