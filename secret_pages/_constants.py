"""Common literal values used across secret_pages.

These constants keep setting keys, defaults, and injected markup centralized so
the config resolver, pipeline stages, and tests import the same values without
drifting. Intended for internal use within the secret_pages package.

Examples
--------
>>> from secret_pages import _constants
>>> _constants.DEFAULT_URL_PREFIX
'/s/'
>>> _constants.NOINDEX_META.startswith('<meta name="robots"')
True
"""

SETTINGS_FILENAME = "_config.yml"
SETTINGS_SECTION = "secret_posts"
# Renamed from the Jekyll plugin's JEKYLL_SECRET_SALT; the old name is not read.
SALT_ENV_VAR = "SECRET_POSTS_SALT"

DEFAULT_SOURCE_DIR = "_secret"
DEFAULT_COLLECTION_NAME = "secret"
DEFAULT_URL_PREFIX = "/s/"
DEFAULT_INDEX_LAYOUT = "default"
TOKEN_LENGTH = 32

NOINDEX_META = '<meta name="robots" content="noindex, nofollow">'
