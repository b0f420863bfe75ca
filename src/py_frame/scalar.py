"""
PyScalar: a tagged boolean / number / text value.

Used to pass typed options (see config.ReadOption) and as a conversion source.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Type, Union

from .convert import coerce, render
from .errors import PyFrameTypeError, PyFrameValueError


class Kind(Enum):
	BOOLEAN = "boolean"
	NUMBER = "number"
	TEXT = "text"


@dataclass(frozen=True)
class PyScalar:
	"""
	One boolean, number or text value, tagged with its Kind.

	Attributes
	----------
	kind : Kind
		Which payload is held
	value : bool | float | str
		The payload itself; numbers are always stored as float

	Notes
	-----
	- bool is checked before int (bool is a subclass of int)
	- Instances are immutable; copy() gives an equal, independent instance

	Examples
	--------
	>>> PyScalar(True).kind
	<Kind.BOOLEAN: 'boolean'>
	>>> PyScalar(2).value
	2.0
	>>> PyScalar(2.5).as_type(int)
	2
	>>> PyScalar(False).as_type(str)
	''
	"""

	value: Union[bool, float, str]
	kind: Optional[Kind] = None

	def __post_init__(self):
		value = self.value
		if isinstance(value, bool):
			kind = Kind.BOOLEAN
		elif isinstance(value, (int, float)):
			kind = Kind.NUMBER
			try:
				value = float(value)
			except OverflowError:
				raise PyFrameValueError(f"Number {value} is too large for a PyScalar") from None
		elif isinstance(value, str):
			kind = Kind.TEXT
		else:
			raise PyFrameTypeError(
				f"PyScalar holds bool, int, float or str, not {type(value).__name__}"
			)
		if self.kind is not None and self.kind is not kind:
			raise PyFrameTypeError(f"Value {self.value!r} does not match kind {self.kind.name}")
		# frozen dataclass: bypass __setattr__ to normalize
		object.__setattr__(self, 'value', value)
		object.__setattr__(self, 'kind', kind)

	def __repr__(self):
		return f"PyScalar({self.value!r})"

	@property
	def is_boolean(self) -> bool:
		return self.kind is Kind.BOOLEAN

	@property
	def is_number(self) -> bool:
		return self.kind is Kind.NUMBER

	@property
	def is_text(self) -> bool:
		return self.kind is Kind.TEXT

	def copy(self) -> "PyScalar":
		return PyScalar(self.value)

	def as_type(self, target: Type) -> Any:
		"""
		Read the payload as target.

		str gives the text payload for TEXT scalars and '' for the other kinds;
		this is an option carrier, not a general formatter. For other targets
		booleans and numbers are rendered to text first and then parsed, so
		PyScalar(2.5).as_type(int) == 2 and PyScalar(True).as_type(float) == 1.0.
		A TEXT payload is parsed directly.
		"""
		if target is str:
			return self.value if self.kind is Kind.TEXT else ""
		if self.kind is Kind.TEXT:
			return coerce(self.value, target)
		return coerce(render(self.value), target)
