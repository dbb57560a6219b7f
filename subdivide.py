"""
slice-and-dice treemap layout

the canvas is split along the x axis in proportion to the values of the
top level children, each child's rectangle is inset by its padding and
split along the y axis in proportion to its own children, and so on,
alternating axis at every depth. siblings are laid out in the order given,
never sorted.

usage:

    tm = TreeMap()
    tm.set_cell_color(lambda share, subtree: '#7fbf7f')
    doc = tm.render([{'Foo': 34}, [{'Bar': 12}, {'Baz': 8}]], 500, 300)
    doc.save('treemap.svg')
"""
import enum
import math
from dataclasses import dataclass
from typing import Any, Optional

from errors import ConfigurationError, MalformedTreeError
from logger import logger
from renderers.svg import SvgDocument
from styles import StyleResolver
from tree import Leaf, Node, parse_tree, child_values, reduced_value
from utils import format_number


class Axis(enum.Enum):
    HORIZONTAL = 'horizontal'
    VERTICAL = 'vertical'

    @property
    def opposite(self):
        return Axis.VERTICAL if self is Axis.HORIZONTAL else Axis.HORIZONTAL


class ZeroTotal(enum.Enum):
    """What to do with a subtree whose children sum to zero."""
    SKIP = 'skip'    # emit nothing for the children
    EQUAL = 'equal'  # give every child the same share


@dataclass
class Cell:
    x: float
    y: float
    width: float
    height: float
    share: float
    value: float
    axis: Axis
    depth: int
    padding: Any
    fill: Any
    border: Any
    label: Optional[str] = None
    text_style: Any = None

    @property
    def is_leaf(self):
        return self.label is not None

    @property
    def area(self):
        return self.width * self.height

    @property
    def style(self):
        return 'fill: %s; fill-opacity: 1; %s' % (self.fill, self.border)

    @property
    def rotation(self):
        # labels read along the long side of a vertically stacked cell
        return 90 if self.axis is Axis.VERTICAL else 0


class TreeMap(object):
    def __init__(self, styles=None, zero_total=ZeroTotal.SKIP, clamp_padding=False):
        self.styles = styles or StyleResolver()
        self.zero_total = ZeroTotal(zero_total)
        self.clamp_padding = clamp_padding

    def set_style(self, name, fn):
        self.styles.set(name, fn)

    def set_cell_color(self, fn):
        self.styles.set_cell_color(fn)

    def set_border(self, fn):
        self.styles.set_border(fn)

    def set_padding(self, fn):
        self.styles.set_padding(fn)

    def set_text_properties(self, fn):
        self.styles.set_text_properties(fn)

    def compute_cells(self, tree, width, height):
        """Lay out `tree` on a width x height canvas, return cells in drawing order."""
        _check_dimension('width', width)
        _check_dimension('height', height)
        tree = parse_tree(tree)
        if isinstance(tree, Leaf):
            tree = Node([tree])
        # an overflowing sum anywhere below makes the root total infinite
        if not math.isfinite(reduced_value(tree)):
            raise MalformedTreeError('leaf values sum to infinity')

        cells = []
        self.render_subtree(cells, tree, 0, 0, width, height, Axis.HORIZONTAL)
        return cells

    def render(self, tree, width, height):
        """Render `tree` into a new SvgDocument of the given size.

        The layout is complete before the document is built, so an error
        raised by parsing, layout or a style function leaves no document.
        """
        cells = self.compute_cells(tree, width, height)
        logger.debug('rendering %d cells on %sx%s canvas', len(cells), width, height)

        doc = SvgDocument()
        svg = doc.append_child(None, doc.create_element('svg'))
        doc.set_attribute(svg, 'width', width)
        doc.set_attribute(svg, 'height', height)
        doc.set_attribute(svg, 'version', '1.0')

        group = doc.append_child(svg, doc.create_element('g'))
        for cell in cells:
            emit_cell(doc, group, cell)

        return doc

    def render_subtree(self, cells, tree, x, y, width, height, axis, depth=0):
        values = child_values(tree)
        total = sum(values)
        shares = self._shares(values, total, depth)
        offset = 0

        for child, value, share in zip(tree.children, values, shares):
            padding = self.styles.padding(share, value)

            if axis is Axis.HORIZONTAL:
                cell_x, cell_y = x + offset * width, y
                cell_w, cell_h = share * width, height
            else:
                cell_x, cell_y = x, y + offset * height
                cell_w, cell_h = width, share * height

            cell = Cell(cell_x, cell_y, cell_w, cell_h,
                        share=share,
                        value=value,
                        axis=axis,
                        depth=depth,
                        padding=padding,
                        fill=self.styles.cell_color(share, value),
                        border=self.styles.border(share, value))
            cells.append(cell)

            if isinstance(child, Node):
                inner_w = cell_w - 2 * padding
                inner_h = cell_h - 2 * padding
                if self.clamp_padding:
                    inner_w, inner_h = max(0, inner_w), max(0, inner_h)
                self.render_subtree(cells, child,
                                    cell_x + padding, cell_y + padding,
                                    inner_w, inner_h,
                                    axis.opposite, depth + 1)
            else:
                cell.label = child.label
                cell.text_style = self.styles.text_properties(share, value, child.label)

            logger.trace('%s %s share=%.4f at (%s, %s) %sx%s',
                         axis.value, cell.label or '<node>', share,
                         cell_x, cell_y, cell_w, cell_h)

            offset += share

    def _shares(self, values, total, depth):
        if total > 0:
            return [v / total for v in values]
        if not values:
            return []
        if self.zero_total is ZeroTotal.EQUAL:
            logger.warning('zero total subtree at depth %d, splitting %d children equally',
                           depth, len(values))
            return [1 / len(values)] * len(values)
        logger.warning('zero total subtree at depth %d, skipping %d children', depth, len(values))
        return []


def emit_cell(doc, parent, cell):
    rect = doc.append_child(parent, doc.create_element('rect'))
    doc.set_attribute(rect, 'x', cell.x)
    doc.set_attribute(rect, 'y', cell.y)
    doc.set_attribute(rect, 'width', cell.width)
    doc.set_attribute(rect, 'height', cell.height)
    doc.set_attribute(rect, 'style', cell.style)

    if cell.is_leaf:
        text = doc.append_child(parent, doc.create_text('text', cell.label))
        doc.set_attribute(text, 'x', cell.x + cell.padding)
        doc.set_attribute(text, 'y', cell.y + cell.padding)
        doc.set_attribute(text, 'transform', 'rotate(%d, %s, %s)' % (
            cell.rotation, format_number(cell.x), format_number(cell.y)))
        doc.set_attribute(text, 'style', cell.text_style)


def _check_dimension(name, value):
    if isinstance(value, bool) or not isinstance(value, (int, float)) \
            or not math.isfinite(value) or value <= 0:
        raise ConfigurationError('%s must be a positive number, got %r' % (name, value))
