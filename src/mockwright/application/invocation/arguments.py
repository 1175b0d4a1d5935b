"""Argument capture: call syntax -> CallArguments snapshot."""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING

from mockwright.domain.model.recorded_call import CallArguments

if TYPE_CHECKING:
    from collections.abc import Mapping

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def capture_arguments(
    binder: inspect.Signature,
    args: tuple[object, ...],
    kwargs: Mapping[str, object],
) -> CallArguments:
    """Bind a call against a signature and snapshot its arguments.

    Positional parameters keep declaration order and *args entries follow.
    Once a positional parameter is left out (default used), later positional
    parameters passed by keyword are recorded by key. Keyword-only parameters
    and **kwargs entries are recorded by key. Defaults are not filled in.

    Raises:
        TypeError: If the call does not fit the signature
    """
    bound = binder.bind(*args, **kwargs)

    positional: list[object] = []
    named: dict[str, object] = {}
    skipped = False

    for param in binder.parameters.values():
        if param.name not in bound.arguments:
            if param.kind in _POSITIONAL:
                skipped = True
            continue

        value = bound.arguments[param.name]
        if param.kind in _POSITIONAL:
            if skipped:
                named[param.name] = value
            else:
                positional.append(value)
        elif param.kind is inspect.Parameter.VAR_POSITIONAL:
            positional.extend(value)  # type: ignore[call-overload]
        elif param.kind is inspect.Parameter.KEYWORD_ONLY:
            named[param.name] = value
        else:
            named.update(value)  # type: ignore[call-overload]

    return CallArguments(tuple(positional), named)
