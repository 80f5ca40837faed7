"""``{{placeholder}}`` substitution for translation templates."""

import re
from typing import Any, Mapping, Optional

PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")


def interpolate(template: str, params: Optional[Mapping[str, Any]]) -> str:
    """Replace ``{{name}}`` tokens with ``str(params[name])``.

    Tokens without a matching parameter are left exactly as written.
    """
    if not params:
        return template

    def replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name in params:
            return str(params[name])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(replace, template)
