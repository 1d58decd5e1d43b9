"""``{{name}}`` placeholder substitution."""
from __future__ import annotations

import re
from typing import Any, Mapping


def interpolate(template: str, values: Mapping[Any, Any]) -> str:
    """Replace every ``{{name}}`` in ``template`` with ``str(values[name])``.

    Only the placeholders named in ``values`` are matched, so stray braces
    around them are left alone and unknown placeholders are kept verbatim.
    The template is scanned once; text coming from a value is never expanded
    again.
    """
    if not values:
        return template
    replacements = {"{{%s}}" % k: str(v) for k, v in values.items()}
    # longest first, a shorter token must not shadow a longer one it prefixes
    tokens = sorted(replacements, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(token) for token in tokens))
    return pattern.sub(lambda m: replacements[m.group(0)], template)
