"""Board configuration constants."""

# Board geometry
DISK_NAMES = ("A", "B", "C", "D", "E")  # Innermost to outermost
SECTOR_COUNT = 8
DEGREES_PER_SECTOR = 45

# Platforms
FIXED_LEVEL = 0
ROTATING_LEVELS = (1, 2, 3)  # Level 2 rides on level 1, level 3 on level 2
LEVELS = (FIXED_LEVEL,) + ROTATING_LEVELS
DEFAULT_INITIAL_ANGLES = (0, 0, 0)
STANDARD_ROTATION_STEPS = -1  # One sector counter-clockwise per game rotation

# Catalog object types
PLANET = "planet"
COMET = "comet"
ASTEROID = "asteroid"
HOLLOW = "hollow"
EMPTY = "empty"
OBJECT_TYPES = (PLANET, COMET, ASTEROID, HOLLOW, EMPTY)
PHYSICAL_OBJECT_TYPES = (PLANET, COMET, ASTEROID)

# Movement
MOVE_COST = 1  # Energy per cell
ASTEROID_EXIT_SURCHARGE = 1  # Extra energy to leave an asteroid field (game rule)

# Probes
MAX_PROBES_PER_OWNER = 1
LAUNCH_OBJECT_ID = "earth"
