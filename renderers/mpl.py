import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from .colormap import depth_color


def render(cells, width, height, show=True):
    """Quick look at a computed layout: cell outlines colored by depth, leaf labels.

    Coordinates are SVG style, y grows downward.
    """
    fig, ax = plt.subplots()
    for cell in cells:
        c = depth_color(cell.depth)
        ax.add_patch(Rectangle((cell.x, cell.y), cell.width, cell.height,
                               facecolor='none', edgecolor=c))
        if cell.is_leaf and cell.area > 0:
            ax.text(cell.x + cell.width / 2, cell.y + cell.height / 2, cell.label,
                    ha='center', va='center', fontsize=8,
                    rotation=-cell.rotation, clip_on=True)

    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_aspect('equal')

    if show:
        plt.show()
    return fig
