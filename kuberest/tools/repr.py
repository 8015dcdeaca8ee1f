import json
from typing import Any

# error messages carry the offending input, keep them readable
MAX_DISPLAY_LEN = 400


def disp_text(input: Any, limit: int = MAX_DISPLAY_LEN) -> str:
    if isinstance(input, bytes):
        input = input.decode("utf-8", errors="replace")

    text = input if isinstance(input, str) else repr(input)
    if len(text) > limit:
        return "%s... [%s chars]" % (text[:limit], len(text))

    return text


def disp_document(dct: Any, limit: int = MAX_DISPLAY_LEN) -> str:
    try:
        text = json.dumps(dct, sort_keys=True)
    except (TypeError, ValueError):
        text = repr(dct)

    return disp_text(text, limit=limit)
