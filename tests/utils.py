"""
Test utilities shared by the unit tests
"""


class SameWhenEqualId:
    """Custom value type whose instances compare equal when their ids match"""

    def __init__(self, ident):
        self.ident = ident

    def __eq__(self, other):
        return isinstance(other, SameWhenEqualId) and other.ident == self.ident

    def __hash__(self):
        return hash(self.ident)

    def __repr__(self):
        return f"SameWhenEqualId({self.ident})"


class Unhashable:
    """Custom value type that equals by content and cannot be hashed"""

    __hash__ = None

    def __init__(self, items):
        self.items = list(items)

    def __eq__(self, other):
        return isinstance(other, Unhashable) and other.items == self.items
