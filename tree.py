"""
Value tree model.

A tree is either a Leaf (one label mapped to a non-negative number) or a
Node (an ordered list of child trees). The plain, JSON friendly form of the
same structure is a single-entry dict for a leaf and a list for a node:

    [{'Foo': 34}, [{'Bar': 12}, {'Baz': 8}]]

Sibling order is the layout order and is never changed.
"""
import math
import numbers
from dataclasses import dataclass, field

from errors import MalformedTreeError


@dataclass(frozen=True)
class Leaf:
    label: str
    value: float

    def __str__(self):
        return '<Leaf %s: %s>' % (self.label, self.value)


@dataclass(frozen=True)
class Node:
    children: tuple = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, 'children', tuple(self.children))

    def __len__(self):
        return len(self.children)

    def __iter__(self):
        return iter(self.children)

    def __getitem__(self, index):
        return self.children[index]

    def __str__(self):
        return '<Node %d children, total %s>' % (len(self.children), reduced_value(self))


def parse_tree(obj, path=()):
    """Convert the plain nested form into Leaf/Node objects.

    Raises MalformedTreeError at the first node that is neither a
    single-entry mapping with a non-negative finite number, nor a list.
    """
    if isinstance(obj, (Leaf, Node)):
        return obj

    if isinstance(obj, dict):
        if len(obj) != 1:
            raise MalformedTreeError(
                'leaf must map exactly one label to a value, got %d entries' % len(obj), path)
        (label, value), = obj.items()
        return Leaf(str(label), _check_value(value, path))

    if isinstance(obj, (list, tuple)):
        return Node([parse_tree(child, path + (n,)) for n, child in enumerate(obj)])

    raise MalformedTreeError('expected a leaf mapping or a list, got %s' % type(obj).__name__, path)


def _check_value(value, path):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise MalformedTreeError('leaf value must be a number, got %r' % (value,), path)
    if not math.isfinite(value) or value < 0:
        raise MalformedTreeError('leaf value must be finite and non-negative, got %r' % (value,), path)
    return value


def reduced_value(tree):
    """Sum of all leaf values under `tree` (the leaf value itself for a leaf)."""
    if isinstance(tree, Leaf):
        return tree.value
    return sum(reduced_value(child) for child in tree.children)


def child_values(node):
    """Reduced value of every immediate child of `node`, in order."""
    return [reduced_value(child) for child in node.children]


def tree_to_dict(t):
    if isinstance(t, Leaf):
        return {t.label: t.value}
    return [tree_to_dict(c) for c in t.children]


def count_leaves(t):
    if isinstance(t, Leaf):
        return 1
    return sum(count_leaves(c) for c in t.children)


def print_tree(t, L=0, max=3):
    """print to stdout"""
    if L < max:
        if isinstance(t, Leaf):
            print('%s%s: %s' % ('  ' * L, t.label, t.value))
        else:
            print('%s[%s]' % ('  ' * L, reduced_value(t)))
            for child in t.children:
                print_tree(child, L + 1, max)
