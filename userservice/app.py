"""Application wiring, HTTP server, scheduled jobs and the service entry point."""

from __future__ import annotations

import argparse
import logging
import re
import signal
import sqlite3
import sys
import threading
import tomllib
import uuid
from collections import Counter
from dataclasses import dataclass, field
from http import HTTPMethod
from typing import Any, Callable, Sequence, TextIO

from flask import Flask, g, jsonify, request

from userservice.facade import UserFacade
from userservice.handlers import UserHandler
from userservice.repository import SqlUserRepository, open_database
from userservice.routes import BASE_URL, RouteConfig, user_routes
from userservice.rules import UserValidator
from userservice.usecase import UserUsecase

log = logging.getLogger(__name__)

_PATH_PARAM = re.compile(r":(\w+)")
_BODY_METHODS = frozenset({HTTPMethod.POST, HTTPMethod.PUT, HTTPMethod.PATCH})


@dataclass
class Config:
    """Service settings: where to listen and which databases to use."""

    host: str = "0.0.0.0"
    port: int = 8080
    postgres: str = "users.db"
    replica_postgres: str = "users.db"


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    value = data.get(name, {})
    if not isinstance(value, dict):
        raise ValueError(f"section {name!r} must be a table")
    return value


def _typed(section: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = section.get(key, default)
    if not isinstance(value, kind) or isinstance(value, bool):
        raise ValueError(f"setting {key!r} must be of type {kind.__name__}")
    return value


def load_config(path: str) -> Config:
    """Read a TOML file with [server], [postgres] and [replica_postgres] tables."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    defaults = Config()
    server = _section(data, "server")
    main_db = _section(data, "postgres")
    replica_db = _section(data, "replica_postgres")
    return Config(
        host=_typed(server, "host", str, defaults.host),
        port=_typed(server, "port", int, defaults.port),
        postgres=_typed(main_db, "path", str, defaults.postgres),
        replica_postgres=_typed(replica_db, "path", str, defaults.replica_postgres),
    )


@dataclass
class App:
    """A wired application: its settings, HTTP server and handlers."""

    config: Config
    server: Flask
    handlers: list[Any] = field(default_factory=list)


def _flask_path(path: str) -> str:
    return f"{BASE_URL}/{_PATH_PARAM.sub(r'<\1>', path.lstrip('/'))}"


def _make_view(route: RouteConfig) -> Callable[..., Any]:
    def view(**params: str) -> Any:
        log.info("request %s %s id=%s", route.method, request.path, g.request_id)
        payload = request.get_json(silent=True) if route.method in _BODY_METHODS else None
        status, body = route.handler(params, payload)
        return jsonify(body), status

    return view


def build_server(routes: Sequence[RouteConfig]) -> Flask:
    """Create a Flask application serving routes under the API base URL."""
    server = Flask("userservice")

    @server.before_request
    def _assign_request_id() -> None:
        g.request_id = str(uuid.uuid4())

    @server.get("/health")
    def _health() -> Any:
        return jsonify({"status": "ok"})

    for route in routes:
        view = _make_view(route)
        for hook in route.middleware:
            view = hook(view)
        server.add_url_rule(
            _flask_path(route.path),
            endpoint=f"{route.method}:{route.path}",
            view_func=view,
            methods=[str(route.method)],
        )
    return server


def init_app(config: Config) -> App:
    """Build the full object graph for config."""
    main_db = open_database(config.postgres)
    replica_db = open_database(config.replica_postgres)
    repo = SqlUserRepository(main_db, replica_db)
    usecase = UserUsecase(repo, UserValidator())
    handler = UserHandler(UserFacade(usecase))
    server = build_server(user_routes(handler))
    return App(config=config, server=server, handlers=[handler])


class CronScheduler:
    """Runs registered jobs repeatedly at fixed intervals in background threads."""

    def __init__(self) -> None:
        self._jobs: list[tuple[float, Callable[[], Any]]] = []
        self._stop = threading.Event()
        self._threads: list[threading.Thread] = []

    def register(self, interval: float, job: Callable[[], Any]) -> None:
        """Run job every interval seconds once started."""
        if interval <= 0:
            raise ValueError("interval must be positive")
        if self._threads:
            raise RuntimeError("cannot register jobs on a running scheduler")
        self._jobs.append((interval, job))

    def start(self) -> None:
        """Start every registered job."""
        if self._threads:
            raise RuntimeError("scheduler already started")
        self._stop.clear()
        for interval, job in self._jobs:
            thread = threading.Thread(target=self._run, args=(interval, job), daemon=True)
            self._threads.append(thread)
            thread.start()

    def stop(self) -> None:
        """Stop all jobs and wait for them to finish."""
        self._stop.set()
        for thread in self._threads:
            thread.join()
        self._threads.clear()

    def _run(self, interval: float, job: Callable[[], Any]) -> None:
        while not self._stop.wait(interval):
            try:
                job()
            except Exception:
                log.exception("scheduled job failed")


class MyHandler:
    """Scheduled jobs of the service; counts how often each job has run."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out
        self._lock = threading.Lock()
        self.runs: Counter[str] = Counter()

    def _run(self, name: str) -> str:
        with self._lock:
            self.runs[name] += 1
        message = f"run cron {name}"
        print(message, file=self._out if self._out is not None else sys.stdout)
        return message

    def link_account(self) -> str:
        """Run the account-linking job."""
        return self._run("cron.link-account")

    def notify(self) -> str:
        """Run the notification job."""
        return self._run("cron.notify")


_JOB_INTERVAL = 30.0


def main(argv: Sequence[str] | None = None) -> int:
    """Start the HTTP server and the scheduled jobs until interrupted."""
    parser = argparse.ArgumentParser(prog="userservice")
    parser.add_argument("--config", help="path of a TOML settings file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    try:
        config = load_config(args.config) if args.config else Config()
        app = init_app(config)
    except (OSError, ValueError, sqlite3.Error) as exc:
        log.error("failed to init app: %s", exc)
        return 1

    jobs = MyHandler()
    scheduler = CronScheduler()
    scheduler.register(_JOB_INTERVAL, jobs.link_account)
    scheduler.register(_JOB_INTERVAL, jobs.notify)
    scheduler.start()

    signal.signal(signal.SIGTERM, signal.default_int_handler)
    try:
        app.server.run(host=config.host, port=config.port, threaded=False)
    except KeyboardInterrupt:
        log.info("shutting down")
    finally:
        scheduler.stop()
    return 0