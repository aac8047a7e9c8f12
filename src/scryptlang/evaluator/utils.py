# src/scryptlang/evaluator/utils.py
import logging

from ..config import config
from ..object import Null, Boolean, Number, Array
from ..error_reporter import (
    ScryptRuntimeError, TYPE_MISMATCH, NOT_AN_ARRAY, NOT_INTEGER_INDEX, INDEX_OUT_OF_BOUNDS,
    CONDITION_NOT_BOOL,
)

logger = logging.getLogger("scryptlang.evaluator")

# Global Constants
NULL, TRUE, FALSE = Null(), Boolean(True), Boolean(False)


def debug_log(message, data=None, level="verbose"):
    """Trace evaluation when debug logging is switched on in the config."""
    if not config.should_log(level):
        return
    if data is not None:
        logger.debug("%s: %s", message, data)
    else:
        logger.debug("%s", message)


def native_bool_to_boolean(value):
    return TRUE if value else FALSE


def expect_number(value):
    if not isinstance(value, Number):
        raise ScryptRuntimeError("invalid operand type", TYPE_MISMATCH)
    return value.value


def expect_boolean(value):
    if not isinstance(value, Boolean):
        raise ScryptRuntimeError("condition is not a bool", CONDITION_NOT_BOOL)
    return value.value


def expect_array(value):
    if not isinstance(value, Array):
        raise ScryptRuntimeError("not an array", NOT_AN_ARRAY)
    return value


def resolve_index(array, index):
    """Validate an array/index pair and return the index as an int."""
    if not isinstance(index, Number) or not index.is_integer():
        raise ScryptRuntimeError("index is not an integer", NOT_INTEGER_INDEX)
    expect_array(array)
    position = int(index.value)
    if position < 0 or position >= len(array.elements):
        raise ScryptRuntimeError("index out of bounds", INDEX_OUT_OF_BOUNDS)
    return position
