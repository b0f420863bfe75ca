"""
py-frame: a small in-memory table of text cells

Loads delimited text (CSV-like) into rows and columns, slices and projects
by label or position, and converts cells into typed values on demand.

Main classes:
    - PyFrame: header + rows of text cells
    - PyScalar: boolean / number / text value used for typed options

Every cell is stored as text; see py_frame.frame for the conversion contract.
"""

import logging

from .errors import (
	PyFrameError,
	PyFrameKeyError,
	PyFrameTypeError,
	PyFrameValueError,
	PyFrameIndexError,
	PyFrameShapeError,
	PyFrameArityError,
	PyFrameConversionError,
	PyFrameSchemaError,
	PyFrameSourceError,
	PyFrameDestinationError,
)
from .scalar import Kind, PyScalar
from .config import ReadOption, ReadOptions, WriteOptions
from .frame import Axis, Shape, PyFrame
from .csv import parse_csv, read_csv, read_csv_with, format_csv, to_csv

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
	"PyFrame",
	"PyScalar",
	"Kind",
	"Axis",
	"Shape",
	"ReadOption",
	"ReadOptions",
	"WriteOptions",
	"parse_csv",
	"read_csv",
	"read_csv_with",
	"format_csv",
	"to_csv",
	"PyFrameError",
	"PyFrameKeyError",
	"PyFrameTypeError",
	"PyFrameValueError",
	"PyFrameIndexError",
	"PyFrameShapeError",
	"PyFrameArityError",
	"PyFrameConversionError",
	"PyFrameSchemaError",
	"PyFrameSourceError",
	"PyFrameDestinationError",
]
