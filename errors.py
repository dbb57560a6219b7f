"""Exceptions raised by the treemap renderer."""


class TreemapError(Exception):
    """Base class for all treemap errors."""


class ConfigurationError(TreemapError):
    """Raised for invalid renderer configuration or render arguments."""


class UnknownStylePropertyError(ConfigurationError):
    def __init__(self, prop):
        self.property = prop
        super().__init__('Unknown property %s.' % prop)


class MalformedTreeError(TreemapError):
    """Raised at the first node that is neither a leaf mapping nor a list.

    `path` is the list of indices leading from the root to the offending node.
    """

    def __init__(self, message, path=()):
        self.path = list(path)
        where = '/'.join(str(p) for p in self.path) or '<root>'
        super().__init__('%s (at %s)' % (message, where))
