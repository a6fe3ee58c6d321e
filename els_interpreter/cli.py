"""Interactive shell for the Elasticsearch command interpreter.

Usage:
    els                                   # interactive shell
    els search /logs 10 '{"query": {"match_all": {}}}'
    els --host es.local --port 9200 count /logs

Commands:
    get    /index/type/id
    count  /index1,index2/type1,type2 [size [json]]
    search /index1,index2/type1,type2 [size [json]]
    index  /index/type[/id] json
    delete /index/type/id
"""

import argparse
import sys
from pathlib import Path

from .config import LOG_DIR, load_settings
from .engine import EngineClient
from .errors import EngineError
from .interpreter import Interpreter
from .logging_setup import setup_logger
from .models import ResultEnvelope

PROMPT = "els> "
CONTINUATION_PROMPT = "...> "
EXIT_COMMANDS = {"quit", "exit"}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="els",
        description="Run get/count/search/index/delete commands against Elasticsearch",
    )
    parser.add_argument("--host", help="Elasticsearch host (default: $ELASTICSEARCH_HOST)")
    parser.add_argument("--port", type=int, help="Elasticsearch HTTP port (default: $ELASTICSEARCH_PORT)")
    parser.add_argument("--cluster-name", help="Expected cluster name (default: $ELASTICSEARCH_CLUSTER_NAME)")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("--log-dir", type=Path, default=LOG_DIR, help="Directory for els.log")
    parser.add_argument("command", nargs=argparse.REMAINDER, help="Run a single command and exit")
    return parser.parse_args(argv)


def print_result(result: ResultEnvelope) -> None:
    """Body to stdout on success, to stderr on error."""
    stream = sys.stdout if result.ok else sys.stderr
    body = result.body
    if body and not body.endswith("\n"):
        body += "\n"
    stream.write(body)
    stream.flush()


def read_command() -> str | None:
    """Read one command; a trailing backslash continues it on the next line."""
    lines = []
    prompt = PROMPT
    while True:
        try:
            line = input(prompt)
        except EOFError:
            return "\n".join(lines) if lines else None
        if line.endswith("\\"):
            lines.append(line[:-1])
            prompt = CONTINUATION_PROMPT
            continue
        lines.append(line)
        return "\n".join(lines)


def shell(interpreter: Interpreter) -> None:
    """Interactive loop until quit/exit or end of input."""
    print("Commands: get, count, search, index, delete. 'quit' to exit.")
    while True:
        try:
            line = read_command()
        except KeyboardInterrupt:
            print()
            continue
        if line is None:
            print()
            return

        line = line.strip()
        if not line:
            continue
        if line.lower() in EXIT_COMMANDS:
            return

        try:
            print_result(interpreter.interpret(line))
        except KeyboardInterrupt:
            print()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logger = setup_logger(args.log_dir)

    settings = load_settings(
        host=args.host,
        port=args.port,
        cluster_name=args.cluster_name,
        timeout=args.timeout,
    )

    engine = EngineClient(settings)
    try:
        engine.open()
    except EngineError as e:
        logger.error("Open connection with Elasticsearch: %s", e.message)
        return 2

    try:
        interpreter = Interpreter(engine)
        if args.command:
            result = interpreter.interpret(" ".join(args.command))
            print_result(result)
            return 0 if result.ok else 1
        shell(interpreter)
        return 0
    finally:
        engine.close()


if __name__ == "__main__":
    sys.exit(main())
