"""Configuration constants for yamltable."""

import os

# Marker attribute placed on every table the YAML renderer emits.
# The sanitizer only keeps `data` attributes with this value.
TABLE_DATA_ATTR = "yaml-metadata"

# Reserved keys whose scalar values become links inside per-record tables.
# Templates are formatted with the value.
LINK_FIELDS = {
    "slug": "content/{}.md",
    "link": "{}/01.md",
}

# Files larger than this are shown as preformatted text instead of a table.
# 0 disables the limit.
TSV_MAX_FILE_SIZE = int(os.getenv("YAMLTABLE_TSV_MAX_FILE_SIZE", str(512 * 1024)))

# TSV columns whose cells hold Markdown
TSV_MARKDOWN_FIELDS = r"(?i)(note|question|answer|response)"

# HTTP server
API_HOST = os.getenv("YAMLTABLE_HOST", "127.0.0.1")
API_PORT = int(os.getenv("YAMLTABLE_PORT", "8000"))

# Fixed client-facing message for documents that cannot be rendered
PARSE_ERROR_MESSAGE = "Unable to parse YAML"

LOG_LEVEL = os.getenv("YAMLTABLE_LOG_LEVEL", "WARNING")
