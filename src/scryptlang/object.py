# src/scryptlang/object.py
"""Runtime values.

Numbers, booleans and null are immutable and behave as plain values. Arrays
and closures are handles: binding one to a second name aliases the same
object, so ``push`` through either name is visible through both.
"""
from .error_reporter import ScryptRuntimeError, UNCOMPARABLE, UNPRINTABLE


class Object:
    def inspect(self):
        raise NotImplementedError("Subclasses must implement this method")

    def type(self):
        raise NotImplementedError("Subclasses must implement this method")

    def equals(self, other):
        if type(self) is not type(other):
            return False
        return self.value == other.value

    def copy(self):
        """Immutable values are their own copy."""
        return self


class Number(Object):
    def __init__(self, value): self.value = float(value)
    def type(self): return "NUMBER"

    def inspect(self):
        # Same rendering as a C++ ostream: six significant digits, no trailing zeros
        return format(self.value, "g")

    def is_integer(self):
        return self.value.is_integer()

    def __repr__(self): return f"Number({self.inspect()})"


class Boolean(Object):
    def __init__(self, value): self.value = bool(value)
    def inspect(self): return "true" if self.value else "false"
    def type(self): return "BOOLEAN"
    def __repr__(self): return f"Boolean({self.inspect()})"


class Null(Object):
    value = None
    def inspect(self): return "null"
    def type(self): return "NULL"
    def equals(self, other): return isinstance(other, Null)
    def __repr__(self): return "Null()"


class Array(Object):
    def __init__(self, elements=None):
        self.elements = elements if elements is not None else []

    def type(self): return "ARRAY"

    def inspect(self):
        elements_str = ", ".join(el.inspect() for el in self.elements)
        return f"[{elements_str}]"

    def equals(self, other):
        if not isinstance(other, Array):
            return False
        if len(self.elements) != len(other.elements):
            return False
        return all(a.equals(b) for a, b in zip(self.elements, other.elements))

    def copy(self):
        """Element-wise deep copy with fresh backing storage."""
        return Array([el.copy() for el in self.elements])

    def __repr__(self): return f"Array({self.elements!r})"


class _Callable(Object):
    def equals(self, other):
        if type(self) is not type(other):
            return False
        raise ScryptRuntimeError("cannot compare functions", UNCOMPARABLE)

    def inspect(self):
        raise ScryptRuntimeError("cannot print a function", UNPRINTABLE)


class Closure(_Callable):
    """A function definition paired with the scope it captured."""

    def __init__(self, function, env):
        self.function = function
        self.env = env

    @property
    def name(self): return self.function.name

    @property
    def parameters(self): return self.function.parameters

    @property
    def body(self): return self.function.body

    def type(self): return "FUNCTION"

    def __repr__(self):
        params = ", ".join(self.parameters)
        return f"Closure({self.name}({params}))"


class Builtin(_Callable):
    def __init__(self, fn, name="", arity=None):
        self.fn = fn  # Stores the native Python function
        self.name = name
        self.arity = arity

    def type(self): return "BUILTIN"
    def __repr__(self): return f"<built-in function: {self.name}>"


class ReturnValue(Object):
    """Control signal carrying a ``return`` value up to the calling frame."""

    def __init__(self, value): self.value = value
    def inspect(self): return self.value.inspect()
    def type(self): return "RETURN_VALUE"
    def __repr__(self): return f"ReturnValue({self.value!r})"
