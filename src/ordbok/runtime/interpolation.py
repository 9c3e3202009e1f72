"""Named-parameter interpolation into templates.

Placeholder syntax:
    %{name}         str(value)
    %<name>spec     printf-style conversion, e.g. %<price>.2f or %<n>05d
    %%              literal percent sign

A "%" that starts none of the above is copied through unchanged.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ordbok.diagnostics import Diagnostic, DiagnosticCode, FormatError

if TYPE_CHECKING:
    from ordbok.localization.types import FormatParams

__all__ = ["interpolate"]

_PLACEHOLDER = re.compile(
    r"%(?:"
    r"(?P<escape>%)"
    r"|\{(?P<brace>[^{}]*)\}"
    r"|<(?P<angle>[^<>]*)>(?P<spec>[-+ 0#]*\d*(?:\.\d+)?[diouxXeEfFgGcs])?"
    r")"
)


def _lookup_param(name: str, params: FormatParams) -> object:
    try:
        return params[name]
    except KeyError as e:
        diagnostic = Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_UNKNOWN,
            message=f"No value for placeholder '{name}'",
            hint=f"Pass {name}=... when looking up this template",
        )
        raise FormatError(diagnostic) from e


def interpolate(template: str, params: FormatParams | None = None) -> str:
    """Substitute placeholders in template with values from params.

    Args:
        template: Resolved template string
        params: Values by placeholder name

    Returns:
        Interpolated string

    Raises:
        FormatError: If a placeholder has no value, a printf-style placeholder
            lacks a conversion type, or a value does not fit its conversion

    Example:
        >>> interpolate("Hi %{name}", {"name": "Sam"})
        'Hi Sam'
        >>> interpolate("Total: %<sum>.2f", {"sum": 3.14159})
        'Total: 3.14'
    """
    if "%" not in template:
        return template
    values: FormatParams = params if params is not None else {}

    def substitute(match: re.Match[str]) -> str:
        if match["escape"] is not None:
            return "%"
        if match["brace"] is not None:
            return str(_lookup_param(match["brace"], values))

        name = match["angle"]
        spec = match["spec"]
        if spec is None:
            diagnostic = Diagnostic(
                code=DiagnosticCode.PLACEHOLDER_MALFORMED,
                message=f"Placeholder '%<{name}>' has no conversion type",
                hint="Append a conversion such as s, d or .2f",
            )
            raise FormatError(diagnostic)
        value = _lookup_param(name, values)
        try:
            return f"%{spec}" % (value,)
        except (TypeError, ValueError, OverflowError) as e:
            diagnostic = Diagnostic(
                code=DiagnosticCode.PLACEHOLDER_TYPE_MISMATCH,
                message=f"Cannot format '{name}' with '%{spec}': {e}",
            )
            raise FormatError(diagnostic) from e

    return _PLACEHOLDER.sub(substitute, template)
