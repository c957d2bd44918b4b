#!/usr/bin/env python3
"""
ReTyper CLI: convert wrong-layout text from the command line
"""

from __future__ import annotations
import sys
import argparse
import json
import logging

from retyper.__version__ import __version__
from retyper.log import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='retyper',
        description='Fix text typed in the wrong keyboard layout (QWERTY <-> ЙЦУКЕН)',
    )
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug mode with verbose logging')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config file')
    parser.add_argument('--logfile', type=str, default=None,
                        help='Path to log file (default: ~/.retyper.log)')
    parser.add_argument('--version', action='version',
                        version='%(prog)s ' + __version__)

    sub = parser.add_subparsers(dest='command', required=True)

    layout_opts = argparse.ArgumentParser(add_help=False)
    layout_opts.add_argument(
        '-l', '--layout', dest='layouts', action='append', default=None,
        metavar='ID',
        help='Available layout id, highest priority first (repeatable; '
             'default: "layouts" from config)',
    )

    p_convert = sub.add_parser('convert', parents=[layout_opts],
                               help='Convert text to the other layout')
    p_convert.add_argument('text', nargs='?', default=None,
                           help='Text to convert (default: read stdin)')
    p_convert.add_argument('--json', action='store_true',
                           help='Print {"converted": ..., "target": ...}')

    p_detect = sub.add_parser('detect', help='Print the dominant script of text')
    p_detect.add_argument('text', nargs='?', default=None,
                          help='Text to inspect (default: read stdin)')

    sub.add_parser('layouts', parents=[layout_opts],
                   help='Show how layout ids are classified')

    p_config = sub.add_parser('config', help='Show or change the saved configuration')
    p_config.add_argument('--set-layouts', nargs='+', default=None, metavar='ID',
                          help='Store the installed layout ids, highest priority first')
    p_config.add_argument('--set-active', nargs='*', default=None, metavar='ID',
                          help='Store the user-selected keyboards (no ids clears the list)')
    p_config.add_argument('--reset', action='store_true',
                          help='Restore defaults before applying other changes')

    return parser.parse_args(argv)


def _read_text(text: str | None) -> str:
    if text is not None:
        return text
    return sys.stdin.read().rstrip('\n')


def _layout_ids(args: argparse.Namespace, config: dict) -> list[str]:
    from retyper.core import relevant_layout_ids

    if args.layouts:
        return list(args.layouts)
    return relevant_layout_ids(config['layouts'], config['active_keyboards'])


def _cmd_convert(args: argparse.Namespace, config: dict, log: logging.Logger) -> int:
    from retyper.core import auto_convert

    text = _read_text(args.text)
    layouts = _layout_ids(args, config)
    log.debug("Converting %r with layouts %s", text, layouts)
    result = auto_convert(text, layouts)

    if args.json:
        print(json.dumps(
            {'converted': result.converted, 'target': result.target_layout_id},
            ensure_ascii=False,
        ))
    else:
        print(result.converted)
    return 0


def _cmd_detect(args: argparse.Namespace, config: dict, log: logging.Logger) -> int:
    from retyper.core import detect_script

    print(detect_script(_read_text(args.text)).value)
    return 0


def _cmd_layouts(args: argparse.Namespace, config: dict, log: logging.Logger) -> int:
    from retyper.layouts import classify, display_code

    for layout_id in _layout_ids(args, config):
        variant = classify(layout_id)
        family = variant.name.lower() if variant is not None else 'latin'
        print(f"{layout_id}\t{display_code(layout_id)}\t{family}")
    return 0


def _cmd_config(args: argparse.Namespace, config: dict, log: logging.Logger) -> int:
    from retyper.config import ConfigManager

    manager = ConfigManager(args.config, debug=args.debug)
    changed = args.reset or args.set_layouts is not None or args.set_active is not None

    if args.reset:
        manager.reset_to_defaults()
    if args.set_layouts is not None:
        manager.set('layouts', args.set_layouts)
    if args.set_active is not None:
        manager.set('active_keyboards', args.set_active)

    if changed:
        if not manager.validate():
            log.error("Refusing to save invalid config")
            return 1
        if not manager.save():
            log.error(f"Failed to save config to {manager.config_path}")
            return 1
        log.info(f"Config saved to {manager.config_path}")

    print(json.dumps(manager.get_all(), ensure_ascii=False, indent=2))
    return 0


COMMANDS = {
    'convert': _cmd_convert,
    'detect': _cmd_detect,
    'layouts': _cmd_layouts,
    'config': _cmd_config,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point for ReTyper"""
    args = parse_args(argv)

    log = setup_logging(debug=args.debug, log_file=args.logfile)
    log.debug(f"ReTyper {__version__}, command: {args.command}")

    from retyper.config import load_config

    try:
        log.debug(f"Loading config from: {args.config or 'default'}")
        config = load_config(args.config, debug=args.debug,
                             strict=args.config is not None
                             and args.command != 'config')
    except ValueError as e:
        log.error(f"Failed to load config: {e}")
        return 1

    if args.debug:
        config['debug'] = True

    return COMMANDS[args.command](args, config, log)


if __name__ == '__main__':
    sys.exit(main())
