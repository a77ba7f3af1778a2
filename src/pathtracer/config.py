"""
Configuration settings for the path tracer.
"""

# Smallest ray parameter accepted by the radiance estimator. Keeps rays
# re-emitted from a surface from hitting that same surface again.
T_MIN = 0.001

# Half-thickness given to planar primitives along their degenerate axis.
RECT_PADDING = 0.0001

# Offset past the entry point when looking for the exit of a volume boundary.
MEDIUM_EXIT_OFFSET = 0.0001

DEFAULT_ASPECT_RATIO = 16.0 / 9.0

# Image wrapped around the globe in the earth scene; not shipped with the package.
EARTH_TEXTURE = "earthmap.jpg"

# Rendering settings
RENDER_SETTINGS = {
    'width': 400,
    'samples_per_pixel': 100,
    'max_depth': 50,
    'workers': 4,
    'output': 'out.png',
}

# Sample/bounce presets selectable from the command line.
QUALITY_LEVELS = {
    'preview': {'samples_per_pixel': 8, 'max_depth': 8},
    'balanced': {'samples_per_pixel': 50, 'max_depth': 25},
    'final': {'samples_per_pixel': 200, 'max_depth': 50},
}

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
