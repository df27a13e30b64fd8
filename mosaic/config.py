# config.py
"""
Layout and rendering constants for the mosaic engine
"""

# Spacing between items in a media group
DEFAULT_SPACING = 2

# Aspect ratio classification (width / height)
WIDE_THRESHOLD = 1.2
NARROW_THRESHOLD = 0.8

# Share of the container width used as the height budget per arrangement
THREE_ITEMS_HEIGHT_FACTOR = 0.75  # also used by the four-item top-one layout
MANY_ITEMS_HEIGHT_FACTOR = 0.8

# Split ratios of the leading item
THREE_ITEMS_TOP_SHARE = 0.6
THREE_ITEMS_LEFT_SHARE = 0.6
FOUR_ITEMS_TOP_SHARE = 0.55
MANY_ITEMS_TOP_SHARE = 0.5
MANY_ITEMS_LEFT_SHARE = 0.55

# Height cap used for message bubbles; callers of the engine pass it explicitly
BUBBLE_MAX_HEIGHT = 300

# Rendering
DEFAULT_CORNER_RADIUS = 18
PLACEHOLDER_COLOR = (229, 229, 234, 255)
PLAY_OVERLAY_SIZE = 44
PLAY_OVERLAY_ALPHA = 128          # 50% black
DURATION_BADGE_HEIGHT = 18
DURATION_BADGE_PADDING = 8
DURATION_BADGE_MARGIN = 6
DURATION_BADGE_RADIUS = 4
DURATION_BADGE_ALPHA = 153        # 60% black

# Supported image formats for aspect ratio probing
SUPPORTED_IMAGE_FORMATS = ['png', 'jpg', 'jpeg', 'bmp', 'webp', 'gif', 'tiff']
