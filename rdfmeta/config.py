# config.py
"""
Centralized configuration for the XML metadata driver.

This file fixes:
1) How class names turn into metadata file names.
2) The element / attribute vocabulary of the metadata documents.
3) Where the metadata search path can come from when not given explicitly.
"""

from __future__ import annotations

import os
from typing import List, Optional, Tuple


# -----------------------------
# 1) File naming
# -----------------------------
FILE_EXTENSION: str = ".xml"
FILE_SEPARATOR: str = "."

# Backslash for "Vendor\Blog\Post" style names; dotted Python names pass through.
NAMESPACE_SEPARATORS: Tuple[str, ...] = ("\\",)


# -----------------------------
# 2) Document vocabulary
# -----------------------------
EL_TYPE = "type"
EL_CONFIG = "config"
EL_CHILDREN = "children"
EL_PROPERTY = "property"
EL_COLLECTION = "collection"
EL_ATTRIBUTE = "attribute"

ATTR_TYPEOF = "typeof"
ATTR_IDENTIFIER = "identifier"
ATTR_TAG_NAME = "tag-name"
ATTR_KEY = "key"
ATTR_VALUE = "value"

# semantic term keys, per field kind
TERM_PROPERTY = "property"
TERM_REL = "rel"

# prefix used for a declared default namespace (xmlns="...")
DEFAULT_PREFIX = ""


# -----------------------------
# 3) Search path
# -----------------------------
ENV_DIRS = "RDFMETA_DIRS"


def directories_from_env(value: Optional[str] = None) -> List[str]:
    """
    Split RDFMETA_DIRS (os.pathsep separated) into an ordered directory list.
    Empty segments are dropped; order is kept since the first match wins.
    """
    raw = os.environ.get(ENV_DIRS, "") if value is None else value
    return [d.strip() for d in raw.split(os.pathsep) if d.strip()]
