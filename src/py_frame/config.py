"""
Defaults and option sets for reading and writing CSV text.

The default line terminator comes from the environment, not from the
platform: PY_FRAME_NEWLINE=lf (default) or PY_FRAME_NEWLINE=crlf.
An explicit line_terminator argument always wins.
"""

from __future__ import annotations
import codecs
import os
import warnings
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from .errors import PyFrameTypeError, PyFrameValueError
from .scalar import PyScalar


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_HEADER = True
DEFAULT_SEPARATOR = ","
DEFAULT_AUTO_TRIM = True
DEFAULT_APPEND = False
DEFAULT_ENCODING = "utf-8"

# Records are always joined with this on write, whatever was used on read
WRITE_LINE_TERMINATOR = "\n"

NEWLINE_ENV_VAR = "PY_FRAME_NEWLINE"
LINE_TERMINATORS = {
	"lf": "\n",
	"crlf": "\r\n",
}


def default_line_terminator() -> str:
	"""Line terminator used by read_csv when none is given."""
	name = os.getenv(NEWLINE_ENV_VAR, "lf").strip().lower()
	try:
		return LINE_TERMINATORS[name]
	except KeyError:
		raise PyFrameValueError(
			f"{NEWLINE_ENV_VAR} must be one of {sorted(LINE_TERMINATORS)}, got {name!r}"
		) from None


# ---------------------------------------------------------------------------
# Option sets
# ---------------------------------------------------------------------------

class ReadOption(Enum):
	"""Keys accepted by read_csv_with()."""
	HEADER = "header"
	SEPARATOR = "separator"
	NEW_LINE = "line_terminator"
	AUTO_TRIM = "auto_trim"


def _check_text(owner, name, value):
	if not isinstance(value, str):
		raise PyFrameTypeError(f"{owner}.{name} must be str, not {type(value).__name__}")


def _check_encoding(owner, encoding):
	_check_text(owner, "encoding", encoding)
	try:
		codecs.lookup(encoding)
	except LookupError:
		raise PyFrameValueError(f"{owner}.encoding: unknown encoding {encoding!r}") from None


@dataclass(frozen=True)
class ReadOptions:
	"""Options for read_csv; line_terminator=None means default_line_terminator()."""
	header: bool = DEFAULT_HEADER
	separator: str = DEFAULT_SEPARATOR
	line_terminator: Optional[str] = None
	auto_trim: bool = DEFAULT_AUTO_TRIM
	encoding: str = DEFAULT_ENCODING

	def __post_init__(self):
		if self.line_terminator is None:
			object.__setattr__(self, 'line_terminator', default_line_terminator())
		_check_text("ReadOptions", "separator", self.separator)
		_check_text("ReadOptions", "line_terminator", self.line_terminator)
		_check_encoding("ReadOptions", self.encoding)

	@classmethod
	def from_arguments(cls, arguments: Optional[Mapping[ReadOption, PyScalar]] = None,
			stacklevel: int = 2) -> "ReadOptions":
		"""
		Build options from a ReadOption -> PyScalar mapping.

		Booleans are read with as_type(bool), text with as_type(str).
		Omitted keys fall back to the defaults. Keys that are not a ReadOption
		are ignored with a UserWarning, so their settings keep the defaults too.
		stacklevel is passed to warnings.warn.

		>>> ReadOptions.from_arguments({ReadOption.HEADER: PyScalar(False)}).header
		False
		"""
		arguments = dict(arguments or {})
		for key in [k for k in arguments if not isinstance(k, ReadOption)]:
			warnings.warn(f"Ignoring unknown read option {key!r}", stacklevel=stacklevel)
			del arguments[key]
		for key, value in arguments.items():
			if not isinstance(value, PyScalar):
				raise PyFrameTypeError(
					f"Read option {key.name} must be a PyScalar, not {type(value).__name__}"
				)

		kwargs = {}
		if ReadOption.HEADER in arguments:
			kwargs['header'] = arguments[ReadOption.HEADER].as_type(bool)
		if ReadOption.SEPARATOR in arguments:
			kwargs['separator'] = arguments[ReadOption.SEPARATOR].as_type(str)
		if ReadOption.NEW_LINE in arguments:
			kwargs['line_terminator'] = arguments[ReadOption.NEW_LINE].as_type(str)
		if ReadOption.AUTO_TRIM in arguments:
			kwargs['auto_trim'] = arguments[ReadOption.AUTO_TRIM].as_type(bool)
		return cls(**kwargs)


@dataclass(frozen=True)
class WriteOptions:
	"""Options for to_csv. Records are always joined with WRITE_LINE_TERMINATOR."""
	append: bool = DEFAULT_APPEND
	header: bool = DEFAULT_HEADER
	separator: str = DEFAULT_SEPARATOR
	encoding: str = DEFAULT_ENCODING

	def __post_init__(self):
		_check_text("WriteOptions", "separator", self.separator)
		_check_encoding("WriteOptions", self.encoding)
