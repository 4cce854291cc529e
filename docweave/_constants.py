"""Common literal values used across docweave.

These constants keep published filenames centralized so the generators, the
publisher, and tests can import the same values without drifting. Intended
for internal use within the docweave package.

Examples
--------
>>> from docweave import _constants
>>> _constants.STAGING_PREFIX_TEMPLATE.format(name="public")
'.public-staging-'
>>> _constants.PAGE_EXTENSION
'.json'
"""

DICTIONARY_FILENAME = "dictionary.html"
NAVIGATION_FILENAME = "navigation.html"
PAGE_EXTENSION = ".json"
LINK_EXTENSION = ".html"
STAGING_PREFIX_TEMPLATE = ".{name}-staging-"
