# src/scryptlang/environment.py
from .error_reporter import ScryptRuntimeError, UNKNOWN_IDENTIFIER


class Environment:
    """One lexical scope: a name -> value store plus a link to the outer scope."""

    def __init__(self, outer=None):
        self.store = {}
        self.outer = outer

    # ---- Mapping protocol helpers -------------------------------------------------

    def __contains__(self, name):
        return self.has_variable(name)

    def __iter__(self):
        return iter(self.store)

    def items(self):
        return self.store.items()

    # ---- Core environment operations ---------------------------------------------

    def get(self, name):
        """Walk the chain outward; an unbound name is a runtime error."""
        env = self
        while env is not None:
            if name in env.store:
                return env.store[name]
            env = env.outer
        raise ScryptRuntimeError(f"unknown identifier `{name}`", UNKNOWN_IDENTIFIER)

    def has_variable(self, name):
        """Check if a variable name exists in this scope or any outer scope."""
        env = self
        while env is not None:
            if name in env.store:
                return True
            env = env.outer
        return False

    def define(self, name, value):
        """Bind ``name`` in this scope, shadowing any outer binding."""
        self.store[name] = value
        return value

    def assign(self, name, value):
        """Assign to an existing variable or create it if it doesn't exist.

        The nearest scope that already declares ``name`` is updated; otherwise
        the binding is created here.
        """
        env = self
        while env is not None:
            if name in env.store:
                env.store[name] = value
                return value
            env = env.outer
        self.store[name] = value
        return value

    def copy(self):
        """Snapshot of this scope's bindings sharing the same outer link.

        Values are copied by reference: scalars are immutable and arrays stay
        shared with the original scope.
        """
        snapshot = Environment(outer=self.outer)
        snapshot.store = dict(self.store)
        return snapshot

    def new_child(self):
        return Environment(outer=self)

    def __repr__(self):
        return f"Environment(names={sorted(self.store)}, outer={'yes' if self.outer else 'no'})"
