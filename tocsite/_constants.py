"""Common literal values used across tocsite.

These constants keep asset names and template filenames centralized so the
generator, templates, and tests can import the same values without drifting.
Intended for internal use within the tocsite package.

Examples
--------
>>> from tocsite import _constants
>>> _constants.ASSETS_DIRNAME
'assets'
>>> _constants.PYGMENTS_CSS in _constants.ASSET_FILES
True
"""

ASSETS_DIRNAME = "assets"
STATIC_FILES = ("style.css",)
PYGMENTS_CSS = "pygments.css"
ASSET_FILES = (*STATIC_FILES, PYGMENTS_CSS)
PAGE_TEMPLATE = "page.jinja"
DEFAULT_CONFIG_FILENAME = "site.yaml"
