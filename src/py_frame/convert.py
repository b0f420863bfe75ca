"""
Text <-> value conversion used by PyFrame's typed accessors.

Parsing is stream-style, the way a formatted extraction reads a number:
  - leading whitespace is skipped
  - the longest numeric prefix is taken and the rest of the cell ignored
    ("12kg" -> 12, "3.9" -> 3 for int)
  - bool accepts the integers 0 and 1 only ("1" -> True, "0" -> False)
  - str is returned unchanged (no trimming)

A cell without a usable prefix raises PyFrameConversionError.
"""

from __future__ import annotations
import re
from typing import Any, Callable, Dict, Type

from .errors import PyFrameConversionError, PyFrameTypeError


_INT_PREFIX = re.compile(r'\s*([+-]?\d+)')
_FLOAT_PREFIX = re.compile(r'\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)')


def _parse_int(text: str) -> int:
	match = _INT_PREFIX.match(text)
	if match is None:
		raise PyFrameConversionError(f"Cannot convert {text!r} to int")
	return int(match.group(1))


def _parse_float(text: str) -> float:
	match = _FLOAT_PREFIX.match(text)
	if match is None:
		raise PyFrameConversionError(f"Cannot convert {text!r} to float")
	return float(match.group(1))


def _parse_bool(text: str) -> bool:
	match = _INT_PREFIX.match(text)
	if match is None or int(match.group(1)) not in (0, 1):
		raise PyFrameConversionError(f"Cannot convert {text!r} to bool (expected 0 or 1)")
	return int(match.group(1)) == 1


def _parse_str(text: str) -> str:
	return text


_PARSERS: Dict[Type, Callable[[str], Any]] = {
	str: _parse_str,
	int: _parse_int,
	float: _parse_float,
	bool: _parse_bool,
}


def supported_types():
	"""Target types accepted by coerce()."""
	return tuple(_PARSERS)


def coerce(text: str, target: Type) -> Any:
	"""
	Convert a single text cell to target.

	Parameters
	----------
	text : str
		Cell contents
	target : type
		One of str, int, float, bool

	Raises
	------
	PyFrameTypeError
		If target is not a supported type
	PyFrameConversionError
		If text has no parsable prefix for target
	"""
	parser = _PARSERS.get(target)
	if parser is None:
		name = getattr(target, "__name__", repr(target))
		supported = ", ".join(t.__name__ for t in supported_types())
		raise PyFrameTypeError(f"Unsupported conversion target: {name} (expected one of {supported})")
	return parser(text)


def render(value: Any) -> str:
	"""Render a bool or number the way a formatted insertion writes it.

	bool -> '1' / '0'; numbers -> shortest of fixed/exponent with 6 significant digits.
	"""
	if isinstance(value, bool):
		return "1" if value else "0"
	if isinstance(value, (int, float)):
		return format(float(value), 'g')
	raise PyFrameTypeError(f"Cannot render {type(value).__name__} as a number")
