"""Board configuration constants."""

# Board geometry (innermost disk first)
DISKS = ("A", "B", "C", "D", "E")
SECTOR_COUNT = 8
SECTORS = tuple(range(1, SECTOR_COUNT + 1))
SECTOR_ANGLE = 45  # Degrees per sector

# Disk E carries the sector labels and scoring track, it is never traversed
TRAVERSABLE_DISKS = ("A", "B", "C", "D")

# Ring levels (0 = static base board, 1 = topmost rotating ring)
BASE_LEVEL = 0
RING_LEVELS = (1, 2, 3)
LEVELS = (BASE_LEVEL,) + RING_LEVELS

# Rotation
ROTATION_STEP = SECTOR_ANGLE  # One sector clockwise per advance
INITIAL_ROTATION_ANGLES = (0, 45, 0)  # Ring 2 starts one sector ahead

# Movement
MOVE_COST = 1
ASTEROID_EXIT_PENALTY = 1  # Extra movement to leave an asteroid field

# Objects
EARTH_ID = "earth"
