"""Tests for building value trees from the filesystem."""

import os

from scan import get_directory_tree
from subdivide import TreeMap
from tree import Leaf, Node, reduced_value


def make_files(root):
    (root / 'a.txt').write_bytes(b'x' * 10)
    (root / 'sub').mkdir()
    (root / 'sub' / 'b.bin').write_bytes(b'x' * 30)
    (root / 'skip').mkdir()
    (root / 'skip' / 'c.txt').write_bytes(b'x' * 50)
    (root / 'notes.tmp').write_bytes(b'x' * 5)


def test_scan_directory(tmp_path):
    make_files(tmp_path)
    t = get_directory_tree(str(tmp_path))
    assert isinstance(t, Node)
    assert reduced_value(t) == 95
    assert t[0] == Leaf('a.txt (10.00B)', 10)
    # listing is sorted so the layout is stable between scans
    assert t[1] == Leaf('notes.tmp (5.00B)', 5)


def test_scan_excludes(tmp_path):
    make_files(tmp_path)
    t = get_directory_tree(str(tmp_path), exclude_dirs=['skip'], exclude_filters=['.tmp'])
    assert reduced_value(t) == 40
    assert t == Node([Leaf('a.txt (10.00B)', 10), Node([Leaf('b.bin (30.00B)', 30)])])


def test_scan_exclude_files(tmp_path):
    make_files(tmp_path)
    t = get_directory_tree(str(tmp_path), exclude_files=['a.txt'])
    assert reduced_value(t) == 85


def test_scan_skips_symlinks(tmp_path):
    make_files(tmp_path)
    os.symlink(str(tmp_path / 'a.txt'), str(tmp_path / 'link.txt'))
    t = get_directory_tree(str(tmp_path))
    assert reduced_value(t) == 95


def test_scan_missing_path(tmp_path):
    assert get_directory_tree(str(tmp_path / 'nope')) is None


def test_scanned_tree_renders(tmp_path):
    make_files(tmp_path)
    doc = TreeMap().render(get_directory_tree(str(tmp_path)), 400, 200)
    labels = [t.text for t in doc.find_all('text')]
    assert labels == ['a.txt (10.00B)', 'notes.tmp (5.00B)', 'c.txt (50.00B)', 'b.bin (30.00B)']
