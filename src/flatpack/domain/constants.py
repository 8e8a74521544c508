"""Fixed construction constants for the flat-pack cabinet.

All lengths are in millimeters.
"""

# Distance from the front/back edge of a side panel to a hole centre.
EDGE_MARGIN = 37.0

# Distance of the second top/bottom hole row from its panel centre line.
SECOND_ROW_OFFSET = 100.0

# Part separation used when rendering an exploded view.
EXPLODE_DISTANCE = 80.0

HOLE_RADIUS = 2.0
# Extra cut length so a hole always passes fully through a side panel.
HOLE_CLEARANCE = 2.0

FASTENER_SHAFT_LENGTH = 35.0
FASTENER_SHAFT_RADIUS = 2.0
FASTENER_HEAD_HEIGHT = 4.0
FASTENER_HEAD_RADIUS = 4.0

DEFAULT_SEGMENTS = 32
