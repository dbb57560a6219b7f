"""
build a value tree from a directory on disk

files become leaves labeled 'name (size)' with their size in bytes as the
value, directories become nodes. a node has no label of its own, so a
directory only shows up as the region its files cover.
"""
import os

from logger import logger
from tree import Leaf, Node, print_tree
from utils import format_bytes


def get_directory_tree(path,
                       exclude_dirs=(),
                       exclude_files=(),
                       exclude_filters=(),
                       skip_mount=False):
    """Scan `path` recursively. Returns None for entries that were skipped."""
    base = os.path.basename(path.rstrip(os.sep)) or path

    if os.path.islink(path):
        logger.debug('skip symlink %s', path)
        return None

    realpath = os.path.realpath(path)
    if skip_mount and realpath != '/' and os.path.ismount(realpath):
        # different filesystem, probably don't want to scan
        logger.info('skip mount %s', path)
        return None

    if os.path.isdir(path):
        if base in exclude_dirs:
            logger.debug('skip excluded dir %s', path)
            return None
        try:
            files = sorted(os.listdir(path))
        except OSError as exc:
            logger.warning('skipping %s', exc)
            return None

        children = []
        for file in files:
            if file in exclude_files:
                continue
            if any(filt in file for filt in exclude_filters):
                continue
            subtree = get_directory_tree(os.path.join(path, file),
                                         exclude_dirs, exclude_files, exclude_filters,
                                         skip_mount)
            if subtree is not None:
                children.append(subtree)
        return Node(children)

    if os.path.isfile(path):
        try:
            size = os.path.getsize(path)
        except OSError as exc:
            logger.warning('skipping %s', exc)
            return None
        return Leaf('%s (%s)' % (base, format_bytes(size)), size)

    logger.debug('skip special file %s', path)
    return None


if __name__ == '__main__':
    t = get_directory_tree(os.getenv('PY', '.'))
    print_tree(t)
