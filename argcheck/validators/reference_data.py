"""Reference data — directive keys, naming conventions, and format patterns.

This is the encoded convention knowledge the engine checks against.
Nothing here is computed at call time.
"""

import re

# ──────────────────────────────────────────────────────────────────────
# DIRECTIVES (rule map entries that configure the engine)
# ──────────────────────────────────────────────────────────────────────

DIRECTIVE_PREFIX = "_"

CHECK_NAMES_KEY = "_check_names"
ALLOW_EXTRA_KEYS_KEY = "_allow_extra_keys"
SKIP_KEYS_KEY = "_skip_keys"


# ──────────────────────────────────────────────────────────────────────
# NAMING CONVENTIONS (argument name pattern per declared kind)
# ──────────────────────────────────────────────────────────────────────

# Kinds without an entry (function, svgelement) are not name-checked.
NAME_CONVENTIONS: dict[str, re.Pattern] = {
    "any": re.compile(r"^_data_?$"),
    "array": re.compile(r"_list_?$"),
    "boolean": re.compile(r"^(allow|is|do|has|have|be|if|dont)_"),
    "map": re.compile(r"_map_?$"),
    "integer": re.compile(r"_(count|idx|idto|idint|ms|px)_?$"),
    "number": re.compile(r"_(num|ratio)_?$"),
    "string": re.compile(r"_(name|key|type|text|html)_?$"),
}


# ──────────────────────────────────────────────────────────────────────
# VALUE FORMATS
# ──────────────────────────────────────────────────────────────────────

# Applied to str(value): rejects "1.0", "1e+20", "inf".
INTEGER_PATTERN = re.compile(r"^[+\-]?[0-9]+$")

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# Only the group element is recognized.
SVG_GROUP_TAG = f"{{{SVG_NAMESPACE}}}g"


# ──────────────────────────────────────────────────────────────────────
# MESSAGE FORMATTING
# ──────────────────────────────────────────────────────────────────────

PREVIEW_MAX_CHARS = 20
PREVIEW_TRUNCATE_TO = 17
REASON_SEPARATOR = "\r\n  * "

