"""
PyFrame: an in-memory table of text cells.

Type-conversion contract
------------------------
Every cell is stored as text and converted on request:

  - as_type(T)            1 row x 1 column only, returns one T
  - to_vector(T, axis)    Axis.COLUMN needs exactly one column (one T per row, top to bottom);
                          Axis.ROW needs exactly one row (one T per cell, left to right)
  - to_matrix(T)          any shape, list of lists of T
  - coerce(T, shape)      the shape-inferred form. Shape.VECTOR picks the axis from the
                          row count: a frame with exactly ONE row is flattened along
                          Axis.ROW, anything else along Axis.COLUMN. A 1xN frame and an
                          Nx1 frame therefore both flatten, along different axes, and a
                          1x1 frame always goes along ROW. The axis is picked first; the
                          shape check inside to_vector is the only place that raises.

Supported targets are str, int, float and bool (see convert.py).
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Iterable, List, Sequence, Tuple, Type

from .convert import coerce as _coerce_cell
from .config import ReadOptions
from .errors import (
	PyFrameArityError,
	PyFrameIndexError,
	PyFrameKeyError,
	PyFrameSchemaError,
	PyFrameShapeError,
	PyFrameTypeError,
)


class Axis(Enum):
	COLUMN = 0
	ROW = 1


class Shape(Enum):
	SCALAR = 0
	VECTOR = 1
	MATRIX = 2


def _missing_col_error(name, context="PyFrame"):
	return PyFrameKeyError(f"target column '{name}' was not found in {context}")


def _normalize_index(index: int, length: int) -> int:
	"""Map a negative index onto [0, length): -1 is the last row. No range check."""
	return index if index >= 0 else length + index


class PyFrame:
	"""
	Rows of text cells under a header of column names.

	Frames normally come from read_csv, read_csv_with or parse_csv. PyFrame(header, rows)
	builds one from Python lists and enforces the same row-width check as a load:
	a short or long row raises PyFrameSchemaError and no frame is created.
	"""

	__slots__ = ('_header', '_rows')
	__hash__ = None

	def __init__(self, header: Iterable[str] = (), rows: Iterable[Iterable[str]] = ()):
		"""
		Build a frame from a header and rows of text cells.

		Every row must have exactly len(header) cells (PyFrameSchemaError otherwise)
		and every cell and name must be a str. Input is copied.
		"""
		header = list(header)
		for name in header:
			if not isinstance(name, str):
				raise PyFrameTypeError(f"Column names must be str, not {type(name).__name__}")

		checked = []
		for index, row in enumerate(rows):
			row = list(row)
			if len(row) != len(header):
				raise PyFrameSchemaError(index, len(header), len(row))
			for cell in row:
				if not isinstance(cell, str):
					raise PyFrameTypeError(f"Cells must be str, not {type(cell).__name__}")
			checked.append(row)

		self._header = header
		self._rows = checked

	@classmethod
	def _wrap(cls, header: List[str], rows: List[List[str]]) -> "PyFrame":
		"""Adopt already-validated, already-copied storage without re-checking it."""
		frame = cls.__new__(cls)
		frame._header = header
		frame._rows = rows
		return frame

	#-----------------------------------------------------
	# CSV factories and export
	#-----------------------------------------------------

	@classmethod
	def read_csv(cls, file_path, header=True, separator=",", line_terminator=None, auto_trim=True, encoding="utf-8"):
		"""Load a CSV file. See py_frame.csv.read_csv."""
		from .csv import _load
		options = ReadOptions(header=header, separator=separator,
			line_terminator=line_terminator, auto_trim=auto_trim, encoding=encoding)
		return _load(file_path, options, stacklevel=3)

	@classmethod
	def read_csv_with(cls, file_path, arguments=None):
		"""Load a CSV file using a ReadOption -> PyScalar mapping."""
		from .csv import _load
		options = ReadOptions.from_arguments(arguments, stacklevel=3)
		return _load(file_path, options, stacklevel=3)

	@classmethod
	def parse_csv(cls, text, header=True, separator=",", line_terminator=None, auto_trim=True):
		"""Parse CSV text already in memory. See py_frame.csv.parse_csv."""
		from .csv import _parse
		options = ReadOptions(header=header, separator=separator,
			line_terminator=line_terminator, auto_trim=auto_trim)
		return _parse(text, options, stacklevel=3)

	def to_csv(self, file_path, append=False, header=True, separator=",", encoding="utf-8"):
		"""Write this frame to file_path. See py_frame.csv.to_csv."""
		from .csv import to_csv
		to_csv(self, file_path, append=append, header=header, separator=separator, encoding=encoding)

	def format_csv(self, header=True, separator=",") -> str:
		"""Return the text to_csv would write."""
		from .csv import format_csv
		return format_csv(self, header=header, separator=separator)

	#-----------------------------------------------------
	# Metadata
	#-----------------------------------------------------

	@property
	def header(self) -> List[str]:
		"""Column names (a copy)."""
		return list(self._header)

	@property
	def shape(self) -> Tuple[int, int]:
		return (len(self._rows), len(self._header))

	def size(self):
		return self.shape

	def __len__(self):
		return len(self._rows)

	def data(self) -> List[List[str]]:
		"""All rows as a list of lists of text (a deep copy)."""
		return [list(row) for row in self._rows]

	def describe(self) -> Dict[str, Any]:
		"""Structured metadata: column names, row count, column count."""
		return {
			"header": list(self._header),
			"rows": len(self._rows),
			"columns": len(self._header),
		}

	def copy(self) -> "PyFrame":
		return self._wrap(list(self._header), self.data())

	def __copy__(self):
		return self.copy()

	def __deepcopy__(self, memo):
		return self.copy()

	def __eq__(self, other):
		if not isinstance(other, PyFrame):
			return NotImplemented
		return self._header == other._header and self._rows == other._rows

	def __repr__(self):
		from .display import _printr
		return _printr(self)

	def __iter__(self):
		"""Iterate over rows, each as a one-row PyFrame."""
		for row in self._rows:
			yield self._wrap(list(self._header), [list(row)])

	#-----------------------------------------------------
	# Projection and slicing
	#-----------------------------------------------------

	def _column_index(self, name) -> int:
		try:
			return self._header.index(name)
		except ValueError:
			raise _missing_col_error(name) from None

	def _row_index(self, index: int) -> int:
		position = _normalize_index(index, len(self._rows))
		if position < 0 or position >= len(self._rows):
			raise PyFrameIndexError(f"index number [{index}] was out of range")
		return position

	def __getitem__(self, key):
		"""
		frame['a']          one-column frame
		frame[['b', 'a']]   columns in the order given (list or tuple of names)
		frame[i]            one-row frame; negative i counts from the end

		Always returns a new PyFrame.
		"""
		# bool is an int subclass
		if isinstance(key, bool):
			raise PyFrameTypeError("Row index must be int, not bool")

		if isinstance(key, str):
			idx = self._column_index(key)
			return self._wrap([self._header[idx]], [[row[idx]] for row in self._rows])

		if isinstance(key, int):
			position = self._row_index(key)
			return self._wrap(list(self._header), [list(self._rows[position])])

		if isinstance(key, (list, tuple)) and all(isinstance(k, str) for k in key):
			# Resolve every name before copying anything
			indices = [self._column_index(name) for name in key]
			header = [self._header[i] for i in indices]
			rows = [[row[i] for i in indices] for row in self._rows]
			return self._wrap(header, rows)

		if isinstance(key, slice):
			raise PyFrameTypeError("Use frame.slice(start, end) to select a range of rows")

		raise PyFrameTypeError(
			f"Frame indices must be str, int or a list of str, not {type(key).__name__}"
		)

	def slice(self, start: int, end: int) -> "PyFrame":
		"""
		Rows [start, end) as a new frame; both bounds may be negative.

		Each bound, once normalized, must be a valid row index, so end == len(frame)
		is rejected and the last row can only be reached with frame[-1]. This is a
		known limitation of the bound check and is kept as is.
		"""
		count = len(self._rows)
		s_index = _normalize_index(start, count)
		e_index = _normalize_index(end, count)
		if s_index < 0 or s_index >= count:
			raise PyFrameIndexError(f"start index number [{start}] was out of range")
		if e_index < 0 or e_index >= count:
			raise PyFrameIndexError(f"end index number [{end}] was out of range")
		if s_index > e_index:
			raise PyFrameIndexError("end index must be larger than start index")
		return self._wrap(list(self._header), [list(row) for row in self._rows[s_index:e_index]])

	def rename(self, new_header: Sequence[str]) -> "PyFrame":
		"""Replace every column name (modifies in place, returns self for chaining)"""
		new_header = list(new_header)
		if len(new_header) != len(self._header):
			raise PyFrameArityError(
				f"header size is different: expected {len(self._header)} names, got {len(new_header)}"
			)
		for name in new_header:
			if not isinstance(name, str):
				raise PyFrameTypeError(f"Column names must be str, not {type(name).__name__}")
		self._header = new_header
		return self

	#-----------------------------------------------------
	# Typed conversion
	#-----------------------------------------------------

	def as_type(self, target: Type) -> Any:
		"""The single cell of a 1x1 frame as target."""
		if len(self._rows) != 1 or len(self._rows[0]) != 1:
			raise PyFrameShapeError(
				f"as_type can be used on a 1 row and 1 column frame only, not {self.shape}"
			)
		return _coerce_cell(self._rows[0][0], target)

	def to_vector(self, target: Type, axis: Axis = Axis.COLUMN) -> List[Any]:
		"""One column (Axis.COLUMN) or one row (Axis.ROW) as a list of target."""
		if not isinstance(axis, Axis):
			raise PyFrameTypeError(f"axis must be an Axis, not {type(axis).__name__}")
		if axis is Axis.ROW and len(self._rows) != 1:
			raise PyFrameShapeError(
				f"to_vector along ROW can be used on a 1 row frame only, not {len(self._rows)} rows"
			)
		if axis is Axis.COLUMN and len(self._header) != 1:
			raise PyFrameShapeError(
				f"to_vector along COLUMN can be used on a 1 column frame only, not {len(self._header)} columns"
			)

		if axis is Axis.COLUMN:
			return [_coerce_cell(row[0], target) for row in self._rows]
		return [_coerce_cell(cell, target) for cell in self._rows[0]]

	def to_matrix(self, target: Type) -> List[List[Any]]:
		"""Every cell as target, keeping the row/column layout."""
		return [[_coerce_cell(cell, target) for cell in row] for row in self._rows]

	def infer_axis(self) -> Axis:
		"""Axis used by coerce(T, Shape.VECTOR): ROW for exactly one row, else COLUMN."""
		return Axis.ROW if len(self._rows) == 1 else Axis.COLUMN

	def coerce(self, target: Type, shape: Shape) -> Any:
		"""
		Convert to a value, a flat list or a list of lists depending on shape.

		Shape.VECTOR flattens along infer_axis(); see the module docstring for
		how 1xN, Nx1 and 1x1 frames are treated.
		"""
		if shape is Shape.SCALAR:
			return self.as_type(target)
		if shape is Shape.VECTOR:
			return self.to_vector(target, self.infer_axis())
		if shape is Shape.MATRIX:
			return self.to_matrix(target)
		raise PyFrameTypeError(f"shape must be a Shape, not {type(shape).__name__}")

	def __int__(self):
		return self.as_type(int)

	def __float__(self):
		return self.as_type(float)
