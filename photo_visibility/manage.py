"""
Administration CLI for the photo visibility backend.

Usage:
    photo-visibility init-db                  - create missing tables
    photo-visibility get-config <key>         - show a stored setting
    photo-visibility set-config <key> <value> - store a setting
    photo-visibility help
"""
import logging
import sys

from . import database
from .app_logging import configure_logging
from .infrastructure.repositories import ConfigRepository

logger = logging.getLogger(__name__)


def print_usage():
    print(__doc__)


def cmd_init_db(args):
    # Tables are created by main() before dispatch
    print(f"Database ready: {database.engine.url.render_as_string(hide_password=True)}")
    return 0


def cmd_get_config(args):
    if len(args) < 1:
        print("Error: get-config requires <key>")
        return 1

    key = args[0]
    with database.SessionLocal() as session:
        value = ConfigRepository(session).get_value(key)

    if value is None:
        print(f"{key} is not set")
        return 0
    print(f"{key} = {value}")
    return 0


def cmd_set_config(args):
    if len(args) < 2:
        print("Error: set-config requires <key> <value>")
        print("Example: photo-visibility set-config public_photos_hidden 0")
        return 1

    key, value = args[0], args[1]
    with database.SessionLocal() as session:
        ConfigRepository(session).set_value(key, value)

    logger.info("Config %s set to %r", key, value)
    print(f"{key} = {value}")
    return 0


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) < 1:
        print_usage()
        return 1

    configure_logging()
    database.init_db()

    command = argv[0].lower()
    args = argv[1:]

    commands = {
        'init-db': cmd_init_db,
        'get-config': cmd_get_config,
        'set-config': cmd_set_config,
        'help': lambda _: (print_usage(), 0)[1],
    }

    if command not in commands:
        print(f"Unknown command: {command}")
        print_usage()
        return 1

    return commands[command](args)


if __name__ == "__main__":
    sys.exit(main())
