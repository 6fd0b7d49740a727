"""Print a generated grid for manual inspection.

Parameters come from the environment (or a ``.env`` file in the working
directory)::

    SPHERE_GRID_DIMENSIONALITY=3
    SPHERE_GRID_RADIUS=1000,100
    SPHERE_GRID_LONGITUDE=360,90
    SPHERE_GRID_LATITUDE=180,45
    SPHERE_GRID_RESOLUTION_MODE=step
    SPHERE_GRID_LOG_LEVEL=DEBUG

Each axis variable is ``range,resolution``; angles are in degrees.
"""

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Ensure repository root is on PYTHONPATH so the packages import without installing
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

load_dotenv()

LOG_LEVEL_NAME = os.getenv("SPHERE_GRID_LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s"
)

from sphere_grid import count_points, generate_points, resolve_grid_config

logger = logging.getLogger("grid_debug")


def _axis(name: str, default: str):
    raw = os.getenv(f"SPHERE_GRID_{name}", default)
    span, resolution = (float(part) for part in raw.split(","))
    return span, resolution


def main() -> None:
    dimensionality = int(os.getenv("SPHERE_GRID_DIMENSIONALITY", "3"))
    radius_range, radius_resolution = _axis("RADIUS", "1000,100")
    longitude_range, longitude_resolution = _axis("LONGITUDE", "360,90")
    latitude_range, latitude_resolution = _axis("LATITUDE", "180,45")

    config = resolve_grid_config(
        dimensionality,
        radius_resolution,
        radius_range,
        longitude_resolution,
        longitude_range,
        latitude_resolution,
        latitude_range,
        resolution_mode=os.getenv("SPHERE_GRID_RESOLUTION_MODE", "step"),
    )
    count = count_points(config)
    logger.info("config=%s count=%d", config, count)

    points = generate_points(config)
    for index, (x, y, z) in enumerate(points):
        print(f"{index:6d} {x:14.6f} {y:14.6f} {z:14.6f}")


if __name__ == "__main__":
    main()
