from __future__ import annotations


class NilType:
    """The empty value: the result of an empty body, a missing if branch, (or)."""

    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


Nil = NilType()


def is_nil(value) -> bool:
    """Host None counts as nil, so primitives may return it."""
    return value is Nil or value is None


def is_true(value) -> bool:
    """Everything except nil and false is true, including 0 and ""."""
    return not (is_nil(value) or value is False)
