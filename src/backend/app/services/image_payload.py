from __future__ import annotations

import re

# "data:image/png;base64," and friends; parameters between the media type and
# ";base64" are allowed.
_DATA_URI_PREFIX = re.compile(r"data:[^,]*?;base64,", re.IGNORECASE)


def strip_data_uri_prefix(payload: str) -> str:
    """Return the raw base64 part of an image payload.

    Image pickers send either bare base64 or a full data URI. Anything up to and
    including the ``;base64,`` separator is dropped; bare payloads come back
    unchanged.
    """
    match = _DATA_URI_PREFIX.search(payload)
    if not match:
        return payload
    return payload[match.end():]
