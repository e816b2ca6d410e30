"""Common literal values used across site_compiler.

These constants keep breakpoints, asset naming, and output filenames
centralized so renderers, emitters, and tests import the same values without
drifting. Intended for internal use within the site_compiler package.

Examples
--------
>>> from site_compiler import _constants
>>> _constants.ASSET_NAME_TEMPLATE.format(index=3, ext="png")
'image-3.png'
>>> _constants.TABLET_MAX_WIDTH > _constants.MOBILE_MAX_WIDTH
True
"""

import re

TABLET_MAX_WIDTH = 1023
MOBILE_MAX_WIDTH = 767
SMALL_MOBILE_MAX_WIDTH = 480

STYLESHEET_NAME = "styles.css"
SCRIPT_NAME = "scripts.js"
INDEX_DOCUMENT = "index.html"
FALLBACK_SLUG = "page"

ASSET_NAME_TEMPLATE = "image-{index}.{ext}"
STATIC_ASSET_DIR = "assets"
DATA_URI_PATTERN = re.compile(
    r"data:image/(png|jpe?g|gif|webp|svg\+xml|avif);base64,([A-Za-z0-9+/=]+)"
)

DEFAULT_PROJECT_PREFIX = "my-website"
PREVIEW_HANDLE_PREFIX = "blob:preview/"

GENERIC_FONT_FAMILIES = frozenset(
    {"sans-serif", "serif", "monospace", "cursive", "system-ui"}
)
GOOGLE_FONTS_WEIGHTS = "300;400;500;600;700;800"
