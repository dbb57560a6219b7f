import math

_abbrevs = [(1 << 50, 'P'),
            (1 << 40, 'T'),
            (1 << 30, 'G'),
            (1 << 20, 'M'),
            (1 << 10, 'k'),
            (1, '')
            ]


def format_bytes(size):
    """Return a human readable size string (i.e., kB, MB, etc)"""
    k = 2.0
    # this makes the jump occur at 2kB instead of 1kB, which makes thing a little more readable
    for factor, suffix in _abbrevs:
        if size > k * factor:
            break
    s = "%.2f%sB" % (size / (1.0 * factor), suffix)
    return s


def format_number(value):
    """Format a coordinate or size for an SVG attribute.

    Integral floats lose their trailing `.0`, other floats use the shortest
    repr. Non-finite values are passed through as-is so they stay visible in
    the output.
    """
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)
