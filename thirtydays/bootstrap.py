import argparse
import os
import shutil
import sys

os.environ.setdefault('KIVY_NO_ARGS', '1')

from colorama import Fore, init

from . import __version__ as _td_version
from .config import CONFIG_FILENAME, Config, ConfigurationError
from .repository import CatalogError, MotorcycleRepository

yellow = Fore.YELLOW
green = Fore.GREEN
red = Fore.RED

init(autoreset=True)

current_file_dir = os.path.dirname(os.path.abspath(__file__))


def tdprint(string):
    print(f'{green}[THIRTY DAYS]{Fore.RESET} {string}')


def tderror(string):
    print(f'{red}[THIRTY DAYS]{Fore.RESET} {string}', file=sys.stderr)


def create_settings_file(base_dir=None):
    """
    Creates a copy of thirtydays.toml in the project folder so the user can
    change the settings.

    If the file already exists, it creates a thirtydays-template.toml file
    instead.

    Returns:
        str: Path of the file written
    """
    base_dir = base_dir or os.getcwd()
    template = os.path.join(current_file_dir, CONFIG_FILENAME)

    if os.path.exists(os.path.join(base_dir, CONFIG_FILENAME)):
        target = os.path.join(base_dir, 'thirtydays-template.toml')
        tdprint(f'{CONFIG_FILENAME} already exists, creating thirtydays-template.toml')
    else:
        target = os.path.join(base_dir, CONFIG_FILENAME)
        tdprint(f'{CONFIG_FILENAME} not found, creating it on current working directory')

    shutil.copyfile(template, target)
    return target


def load_config(args):
    """Config from the file given on the command line plus CLI overrides."""
    app_config = Config(getattr(args, 'config_file', None))

    if getattr(args, 'locale', None):
        app_config.set('LOCALE', args.locale)
    if getattr(args, 'dark', False):
        app_config.set('DARK_MODE', True)

    return app_config


def print_catalog(app_config, expanded=False):
    """Print every day of the catalog, resolved in the configured locale."""
    from .presenter import ListPresenter
    from .resources import AssetResolver, StringResolver

    strings = StringResolver(app_config.STRINGS_FILE, locale=app_config.LOCALE)
    if app_config.CATALOG_FILE:
        entries = MotorcycleRepository.load(app_config.CATALOG_FILE)
    else:
        entries = MotorcycleRepository.motorcycles()

    presenter = ListPresenter(entries, strings, AssetResolver(app_config.ASSETS_DIR))
    for position in range(len(presenter)):
        if expanded:
            card = presenter.toggle(position)
        else:
            card = presenter.card(position).render()
        print(f'{yellow}{card.day_text:<8}{Fore.RESET} {card.make_text}')
        if card.quote_text:
            print(f'{"":<8} {card.quote_text}')


def build_parser():
    parser = argparse.ArgumentParser(description='Thirty Days of Motorcycles')
    subparsers = parser.add_subparsers(dest='command')

    subparsers.add_parser(
        'init',
        help=f'Create the `{CONFIG_FILENAME}` configuration file.',
    )

    run_parser = subparsers.add_parser('run', help='Open the app window')
    list_parser = subparsers.add_parser(
        'list', help='Print the catalog to the terminal'
    )
    list_parser.add_argument(
        '--expanded',
        action='store_true',
        help='Also print the quote of each day.',
    )

    for sub in (run_parser, list_parser):
        sub.add_argument(
            '-f',
            '--file',
            dest='config_file',
            help=f'Path to a {CONFIG_FILENAME} (or a directory containing one).',
        )
        sub.add_argument('--locale', help='Locale override, e.g. "pt".')

    run_parser.add_argument(
        '--dark',
        action='store_true',
        help='Use the dark color palette.',
    )

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    tdprint(f'Thirty Days v{_td_version}')

    if args.command == 'init':
        create_settings_file()
        return 0

    try:
        app_config = load_config(args)
        if args.command == 'list':
            print_catalog(app_config, expanded=args.expanded)
        elif args.command == 'run':
            from .app import run_app  # noqa

            run_app(app_config)
    except (ConfigurationError, CatalogError) as e:
        tderror(str(e))
        return 1

    return 0
