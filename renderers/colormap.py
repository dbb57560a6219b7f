"""Palettes and ready-made style functions for TreeMap.set_cell_color and friends."""

colormap = [
    # main       light      dark
    ["#ff7f7f", "#ffbfbf", "#bf7f7f"],
    ["#ffbf7f", "#ffdfbf", "#bf9f5f"],
    ["#ffff00", "#ffffbf", "#bfbf3f"],
    ["#7fff7f", "#bfffbf", "#7fbf7f"],
    ["#7fffff", "#dfffff", "#7fbfbf"],
    ["#bfbfff", "#dfdfff", "#9f9fff"],
    ["#bfbfbf", "#dfdfdf", "#9f9f9f"],
    ["#ff7fff", "#ffbfff", "#bf7fbf"],
]

node_color = '#eeeeef'


def value_gradient(max_value, leaf_values=None):
    """
    Fill color running from green (small) to red (at or above max_value).

    Style functions only see (share, reduced value), so a cell holding a
    leaf can't be told apart from a node by its arguments. Pass the set of
    leaf values in `leaf_values` to color only those, everything else gets
    node_color.
    """
    def cell_color(share, subtree):
        if leaf_values is not None and subtree not in leaf_values:
            return node_color
        value = min(1, subtree / max_value) if max_value else 1
        return "#%02x%02x%02x" % (
            int(115 + value * 89),
            int(210 * (1 - value)),
            int(22 * (1 - value)),
        )
    return cell_color


def share_colors(palette=None):
    """Pick a palette entry by share: the bigger the share, the earlier the color."""
    palette = palette or colormap

    def cell_color(share, subtree):
        n = min(int((1 - share) * len(palette)), len(palette) - 1)
        return palette[n][0]
    return cell_color


def depth_color(depth):
    return colormap[depth % len(colormap)][0]

