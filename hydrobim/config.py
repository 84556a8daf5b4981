"""Global configuration: defaults, display precision, structural constants."""

# Wall/floor thickness assumed for conveyance structures when none is given (m)
DEFAULT_WALL_THICKNESS = 0.15

# Channel defaults
DEFAULT_FREE_BOARD = 0.3
DEFAULT_MANNING_N = 0.013

# Side slopes (H:V) used when a section omits them
DEFAULT_TRAPEZOIDAL_SIDE_SLOPE = 1.5
DEFAULT_TRIANGULAR_SIDE_SLOPE = 1.0
DEFAULT_TRANSITION_SIDE_SLOPE = 0.0

# Primitive solid parameter defaults (before scaling)
SHAPE_DEFAULTS: dict[str, dict[str, float]] = {
    "box": {"width": 1.0, "height": 1.0, "depth": 1.0},
    "cylinder": {"radius": 0.5, "height": 1.0},
    "sphere": {"radius": 0.5},
    "cone": {"bottomRadius": 0.5, "topRadius": 0.0, "height": 1.0},
    "torus": {"majorRadius": 1.0, "minorRadius": 0.3},
}

# Structural constants
SOLADO_THICKNESS = 0.1  # m
STEEL_GRADE = "Grade 60"  # ASTM A615
STEEL_FY_MPA = 420.0
MIN_REBAR_RATIO = 0.0018  # ACI 318, walls and channels

# Decimal places used when formatting report values
LENGTH_DECIMALS = 3
CURRENCY_DECIMALS = 2
REBAR_DECIMALS = 2
STRENGTH_DECIMALS = 0
RATIO_DECIMALS = 4
SLOPE_DECIMALS = 5

# Object IDs are truncated to this many characters in reports
OBJECT_ID_DISPLAY_LENGTH = 12

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
