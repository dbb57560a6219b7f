"""
SVG output document.

SvgDocument is the sink the layout engine writes into: it can create
elements, append them, and set attributes, and nothing else is required of
it by the layout. Serialization escapes text content and attribute values,
so labels are stored raw in the tree.
"""
import xml.etree.ElementTree as ET

from utils import format_number

SVG_NS = 'http://www.w3.org/2000/svg'

# serialize svg elements with a default xmlns instead of an ns0: prefix
ET.register_namespace('', SVG_NS)


def qualify(tag):
    return '{%s}%s' % (SVG_NS, tag)


class SvgDocument(object):
    def __init__(self):
        self.root = None

    # sink contract

    def create_element(self, tag):
        """Create a detached element in the SVG namespace."""
        return ET.Element(qualify(tag))

    def create_text(self, tag, content):
        """Create a detached element holding text content."""
        element = self.create_element(tag)
        element.text = str(content)
        return element

    def append_child(self, parent, child):
        """Append `child` under `parent`; a None parent makes it the root."""
        if parent is None:
            if self.root is not None:
                raise ValueError('document already has a root element')
            self.root = child
        else:
            parent.append(child)
        return child

    def set_attribute(self, element, name, value):
        if isinstance(value, (int, float)):
            value = format_number(value)
        element.set(name, str(value))

    # reading and output, not used during layout

    def find_all(self, tag):
        """All elements with the given (unqualified) tag, in document order."""
        if self.root is None:
            return []
        return list(self.root.iter(qualify(tag)))

    def to_string(self, pretty=True):
        if self.root is None:
            raise ValueError('empty document')
        root = self.root
        if pretty:
            root = _copy(root)
            ET.indent(root, space='  ')
        body = ET.tostring(root, encoding='unicode')
        return '<?xml version="1.0" encoding="UTF-8"?>\n' + body + '\n'

    def save(self, path, pretty=True):
        # serialize first, a failure must not leave an empty file behind
        content = self.to_string(pretty=pretty)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    def __eq__(self, other):
        if not isinstance(other, SvgDocument):
            return NotImplemented
        return self.to_string(pretty=False) == other.to_string(pretty=False)

    __hash__ = None


def _copy(element):
    # indent() rewrites whitespace in place, keep the caller's tree untouched
    return ET.fromstring(ET.tostring(element))
