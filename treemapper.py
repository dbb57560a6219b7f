#!/usr/bin/env python3
"""
treemapper [options] [input.json]
input:    JSON file holding a tree, e.g. [{"Foo": 34}, [{"Bar": 12}, {"Baz": 8}]]
options:
- --scan=DIR                  # scan a directory instead of reading a JSON tree
- --exclude-dir=dirname       # with --scan, exclude directory by name
- --output=file.svg  OR -o    # where to write the svg
- --width, --height           # canvas size
- --config=file.json          # config file
- --preview                   # also show the layout with matplotlib
- -v, -vv                     # debug / trace logging
"""
import argparse
import json
import os
import pathlib
import sys

from errors import ConfigurationError, TreemapError
from logger import logger, set_verbosity
from scan import get_directory_tree
from styles import StyleResolver
from subdivide import TreeMap, ZeroTotal
from tree import count_leaves, parse_tree
from utils import format_bytes

DEFAULT_CONFIG = {
    'svg-renderer': {
        'width': 1200,
        'height': 800,
        'filename': 'treemap.svg',
        'clamp-padding': False,
        'zero-total': 'skip',
    },
    'styles': {},
}


def default_config_path():
    config_file_path = os.path.expanduser('~/.config/treemapper.json')
    if not os.path.exists(config_file_path):
        script_path = str(pathlib.Path(__file__).parent.resolve())
        config_file_path = script_path + '/config.json'
    return config_file_path


def parse_config(path=None):
    """Load the JSON config, filling in defaults for anything it leaves out."""
    config = {k: dict(v) for k, v in DEFAULT_CONFIG.items()}
    if path and not os.path.exists(path):
        raise ConfigurationError('config file not found: %s' % path)
    path = path or default_config_path()
    if not os.path.exists(path):
        logger.debug('no config file at %s, using defaults', path)
        return config

    logger.debug('using config file: %s', path)
    try:
        with open(path) as f:
            loaded = json.load(f)
    except (OSError, ValueError) as exc:
        raise ConfigurationError('could not read config %s: %s' % (path, exc)) from exc

    for section, values in loaded.items():
        if not isinstance(values, dict):
            raise ConfigurationError('config section %r must be an object' % section)
        config.setdefault(section, {}).update(values)
    return config


def parse_args(args):
    parser = argparse.ArgumentParser(prog='treemapper', description='render a value tree as an SVG treemap')
    parser.add_argument('input', nargs='?', help='JSON file holding the tree')
    parser.add_argument('--scan', metavar='DIR', help='scan a directory instead of reading a JSON tree')
    parser.add_argument('-d', '--exclude-dir', action='append', default=[])
    parser.add_argument('--exclude-file', action='append', default=[])
    parser.add_argument('--exclude-filter', action='append', default=[])
    parser.add_argument('-x', '--skip-mount', action='store_true')
    parser.add_argument('-o', '--output')
    parser.add_argument('--width', type=float)
    parser.add_argument('--height', type=float)
    parser.add_argument('--config')
    parser.add_argument('--preview', action='store_true')
    parser.add_argument('-v', '--verbose', action='count', default=0)
    opts = parser.parse_args(args)
    if not opts.input and not opts.scan:
        parser.error('give an input file or --scan DIR')
    return opts


def load_tree(opts):
    if opts.scan:
        t = get_directory_tree(
            opts.scan.rstrip('/') or '/',
            exclude_dirs=opts.exclude_dir,
            exclude_files=opts.exclude_file,
            exclude_filters=opts.exclude_filter,
            skip_mount=opts.skip_mount,
        )
        if t is None:
            raise ConfigurationError('nothing to scan at %s' % opts.scan)
        logger.info('scanned %s files under %s', count_leaves(t), os.path.realpath(opts.scan))
        return t

    try:
        with open(opts.input) as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        raise ConfigurationError('could not read tree %s: %s' % (opts.input, exc)) from exc
    return parse_tree(data)


def build_treemap(config):
    svg_params = config['svg-renderer']
    try:
        zero_total = ZeroTotal(svg_params.get('zero-total', 'skip'))
    except ValueError:
        raise ConfigurationError('zero-total must be one of %s' % [z.value for z in ZeroTotal]) from None
    return TreeMap(styles=StyleResolver.from_config(config.get('styles')),
                   zero_total=zero_total,
                   clamp_padding=bool(svg_params.get('clamp-padding', False)))


def render(opts, config):
    svg_params = config['svg-renderer']
    width = opts.width if opts.width is not None else svg_params.get('width', 1200)
    height = opts.height if opts.height is not None else svg_params.get('height', 800)
    output_path = opts.output or svg_params.get('filename', 'treemap.svg')

    t = load_tree(opts)
    tm = build_treemap(config)
    doc = tm.render(t, width, height)
    doc.save(output_path)
    logger.info('SVG saved to: %s (%s)', output_path, format_bytes(os.path.getsize(output_path)))

    if opts.preview:
        from renderers.mpl import render as render_mpl
        render_mpl(tm.compute_cells(t, width, height), width, height)

    return output_path


def main(args):
    opts = parse_args(args)
    set_verbosity(opts.verbose)
    try:
        config = parse_config(opts.config)
        render(opts, config)
    except (TreemapError, OSError, ValueError) as exc:
        logger.error('%s', exc)
        return 1
    return 0


def cli():
    sys.exit(main(sys.argv[1:]))


if __name__ == '__main__':
    cli()
