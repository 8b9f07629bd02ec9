"""
Positional parameter marshaling.

The node only understands positional ``params``: an argument may be left out
only if every argument after it is left out too. Each operation is described
by an ordered tuple of ``Param`` descriptors and ``marshal`` turns the
caller's arguments into the wire list:

- trailing optional params are dropped while absent, so the
  node applies its own defaults
- once a later argument is present, every earlier param is encoded, absent
  ones with their ``default`` fill value
- a param is absent only when the caller did not supply it or supplied None;
  0, "", False and [] are real values
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Sequence


class _Required:
    def __repr__(self) -> str:
        return "REQUIRED"


REQUIRED: Any = _Required()


# ============ Wire encoders ============


def verbosity(value: Any) -> int:
    """Map a verbose flag onto getblock's verbosity level."""
    return 2 if value else 1


def array(value: Any) -> list:
    return list(value)


def amounts(value: Any) -> dict:
    """Flatten an address -> amount mapping into a single JSON object."""
    return {str(key): amount for key, amount in dict(value).items()}


# ============ Descriptors ============


@dataclass(frozen=True)
class Param:
    name: str
    default: Any = REQUIRED
    encode: Optional[Callable[[Any], Any]] = None
    doc: str = ""

    @property
    def required(self) -> bool:
        return self.default is REQUIRED

    def to_wire(self, value: Any) -> Any:
        if self.encode is None or value is None:
            return value
        return self.encode(value)


def is_present(arguments: Mapping[str, Any], name: str) -> bool:
    return arguments.get(name) is not None


def marshal(params: Sequence[Param], arguments: Mapping[str, Any]) -> list:
    """
    Build the ordered ``params`` list for one call.

    Args:
        params: Descriptors in wire order
        arguments: Caller-supplied values keyed by param name; missing keys
            and None values count as absent

    Returns:
        Positional parameter list with no gaps
    """
    boundary = 0
    for index, param in enumerate(params):
        if param.required or is_present(arguments, param.name):
            boundary = index + 1

    wire: list = []
    for param in params[:boundary]:
        if is_present(arguments, param.name):
            value = arguments[param.name]
        elif param.required:
            raise TypeError(f"missing required argument: '{param.name}'")
        else:
            value = param.default
        wire.append(param.to_wire(value))
    return wire


@dataclass(frozen=True)
class Operation:
    """One named RPC method and its positional parameter shape."""

    name: str
    method: str
    params: tuple[Param, ...] = ()
    doc: str = ""
    category: str = ""
    _signature: inspect.Signature = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_signature", self._build_signature())

    def _build_signature(self) -> inspect.Signature:
        parameters = [inspect.Parameter("self", inspect.Parameter.POSITIONAL_OR_KEYWORD)]
        for param in self.params:
            parameters.append(
                inspect.Parameter(
                    param.name,
                    inspect.Parameter.POSITIONAL_OR_KEYWORD,
                    default=inspect.Parameter.empty if param.required else None,
                )
            )
        return inspect.Signature(parameters)

    def signature(self) -> inspect.Signature:
        return self._signature

    def bind(self, *args: Any, **kwargs: Any) -> list:
        """Map caller arguments onto this operation and marshal them."""
        bound = self._signature.bind(None, *args, **kwargs)
        arguments = dict(bound.arguments)
        arguments.pop("self", None)
        return marshal(self.params, arguments)

    def usage(self) -> str:
        parts = []
        for param in self.params:
            parts.append(param.name if param.required else f"[{param.name}]")
        return " ".join([self.method, *parts])


__all__ = [
    "REQUIRED",
    "Operation",
    "Param",
    "amounts",
    "array",
    "is_present",
    "marshal",
    "verbosity",
]
