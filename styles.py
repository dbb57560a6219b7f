"""
Style resolver: four replaceable style functions consulted once per cell.

Each function is called as fn(share, subtree), where share is the cell's
fraction of its parent and subtree is the cell's reduced value. The
textProperties function also receives the leaf label when it accepts a
third positional argument:

    styles = StyleResolver()
    styles.set_cell_color(lambda share, subtree: '#ff0000' if share > .5 else '#eeeeef')
    styles.set_text_properties(lambda share, subtree, key: 'font-size: %dpx' % len(key))

Returned values are not validated here; they go into the document as-is.
"""
import enum
import inspect

from errors import ConfigurationError, UnknownStylePropertyError


class StyleProperty(enum.Enum):
    CELL_COLOR = 'cellColor'
    BORDER = 'border'
    PADDING = 'padding'
    TEXT_PROPERTIES = 'textProperties'

    @classmethod
    def lookup(cls, name):
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            raise UnknownStylePropertyError(name) from None


DEFAULT_CELL_COLOR = '#eeeeef'
DEFAULT_BORDER = 'stroke-width: 1; stroke: #babdb6'
DEFAULT_PADDING = 2
DEFAULT_TEXT_PROPERTIES = 'font-size: 14px; font-style: sans-serif; fill: #ffffff;'

# config file keys for each property
CONFIG_KEYS = {
    'cell-color': StyleProperty.CELL_COLOR,
    'border': StyleProperty.BORDER,
    'padding': StyleProperty.PADDING,
    'text-properties': StyleProperty.TEXT_PROPERTIES,
}


def constant(value):
    """Style function ignoring its arguments."""
    def style(share, subtree, key=None):
        return value
    return style


def _accepts_key(fn):
    """True if fn can be called with (share, subtree, key)."""
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        # builtins without a signature, assume the two argument form
        return False
    try:
        sig.bind(None, None, None)
    except TypeError:
        return False
    return True


class StyleResolver(object):
    def __init__(self):
        self._functions = {}
        self._accepts_key = {}
        self.set(StyleProperty.CELL_COLOR, constant(DEFAULT_CELL_COLOR))
        self.set(StyleProperty.BORDER, constant(DEFAULT_BORDER))
        self.set(StyleProperty.PADDING, constant(DEFAULT_PADDING))
        self.set(StyleProperty.TEXT_PROPERTIES, constant(DEFAULT_TEXT_PROPERTIES))

    @classmethod
    def from_config(cls, cnf):
        """Build a resolver returning the constants in a `styles` config section."""
        resolver = cls()
        for k, v in (cnf or {}).items():
            if k not in CONFIG_KEYS:
                raise UnknownStylePropertyError(k)
            resolver.set(CONFIG_KEYS[k], constant(v))
        return resolver

    def set(self, name, fn):
        prop = StyleProperty.lookup(name)
        if not callable(fn):
            raise ConfigurationError('style function for %s must be callable, got %r' % (prop.value, fn))
        self._functions[prop] = fn
        self._accepts_key[prop] = _accepts_key(fn)

    def set_cell_color(self, fn):
        self.set(StyleProperty.CELL_COLOR, fn)

    def set_border(self, fn):
        self.set(StyleProperty.BORDER, fn)

    def set_padding(self, fn):
        self.set(StyleProperty.PADDING, fn)

    def set_text_properties(self, fn):
        self.set(StyleProperty.TEXT_PROPERTIES, fn)

    def invoke(self, name, share, subtree, key=None):
        prop = StyleProperty.lookup(name)
        fn = self._functions[prop]
        if key is not None and self._accepts_key[prop]:
            return fn(share, subtree, key)
        return fn(share, subtree)

    def cell_color(self, share, subtree):
        return self.invoke(StyleProperty.CELL_COLOR, share, subtree)

    def border(self, share, subtree):
        return self.invoke(StyleProperty.BORDER, share, subtree)

    def padding(self, share, subtree):
        return self.invoke(StyleProperty.PADDING, share, subtree)

    def text_properties(self, share, subtree, key=None):
        return self.invoke(StyleProperty.TEXT_PROPERTIES, share, subtree, key)
