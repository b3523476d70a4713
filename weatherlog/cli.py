"""CLI entry point for the weather lookup client and history API."""

import argparse
import logging
import sys

from weatherlog.config.loader import get_config_value, load_config, redacted_json
from weatherlog.config.schema import AppConfig
from weatherlog.history.client import HistoryClient
from weatherlog.history.service import HistoryService
from weatherlog.ingest.gateway import WeatherGateway
from weatherlog.ingest.openweather_client import OpenWeatherClient
from weatherlog.ui import render
from weatherlog.ui.controller import HistoryBackend, WeatherController

DEFAULT_CONFIG = "ops/configs/default.yaml"

SHELL_HELP = "Type a city name, :history to toggle history, :quit to exit."


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherlog",
        description="Current weather lookup with search history",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument("--db", default=None, help="SQLite DB path (overrides config)")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # serve
    serve_p = sub.add_parser("serve", help="Run the history API")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None)

    # search / history / shell
    search_p = sub.add_parser("search", help="Look up a city and save it")
    search_p.add_argument("city", nargs="?", default="")
    sub.add_parser("history", help="Show the last ten lookups")
    sub.add_parser("shell", help="Interactive lookup session")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Print one config value")
    get_p.add_argument("key", help="Dotted key, e.g. ui.default_city")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    if args.db:
        config = config.model_copy(
            update={"history": config.history.model_copy(update={"db_path": args.db})}
        )

    if args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "search":
        return _cmd_search(config, args)
    elif args.command == "history":
        return _cmd_history(config)
    elif args.command == "shell":
        return _cmd_shell(config)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def build_history(config: AppConfig) -> HistoryBackend:
    """Remote history API when history.api_url is set, else the local store."""
    if config.history.api_url:
        return HistoryClient(
            config.history.api_url, timeout=config.history.timeout_seconds
        )
    return HistoryService(config.history.db_path, max_limit=config.history.max_limit)


def build_controller(config: AppConfig, alert=None) -> WeatherController:
    client = OpenWeatherClient(
        api_key=config.provider.api_key,
        base_url=config.provider.base_url,
        units=config.provider.units.value,
        timeout=config.provider.timeout_seconds,
    )
    return WeatherController(
        gateway=WeatherGateway(client),
        history=build_history(config),
        alert=alert or _alert,
        default_city=config.ui.default_city,
        history_limit=config.history.max_limit,
    )


def _alert(message: str) -> None:
    print(f"! {message}", file=sys.stderr)


def _cmd_serve(config: AppConfig, args) -> int:
    import uvicorn

    from weatherlog.server import create_app

    host = args.host or config.server.host
    port = args.port or config.server.port
    uvicorn.run(create_app(config), host=host, port=port)
    return 0


def _cmd_search(config: AppConfig, args) -> int:
    controller = build_controller(config)
    controller.load_history()
    reading = controller.search(args.city)
    if reading is None:
        return 1
    controller.toggle_history()
    print(render.render(controller.state))
    return 0


def _cmd_history(config: AppConfig) -> int:
    controller = build_controller(config)
    controller.load_history()
    print(render.format_history(controller.state.history))
    return 0


def _cmd_shell(config: AppConfig) -> int:
    controller = build_controller(config)
    controller.mount()
    print(SHELL_HELP)
    print(render.render(controller.state))
    while True:
        try:
            line = input("search> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return 0
        command = line.strip()
        if command in (":quit", ":q"):
            return 0
        if command in (":history", ":h"):
            controller.toggle_history()
        elif command in (":help", "?"):
            print(SHELL_HELP)
            continue
        else:
            controller.search(command)
        print(render.render(controller.state))


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(redacted_json(config))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(config, args.key))
            return 0
        except KeyError as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config get key")
        return 1
