"""
Run a wayfarer tool from a JSON request file.

Usage: wayfarer <request_file.json>

The file holds {"tool": "<name>", "arguments": {...}}. The result is
written to stdout as JSON; failures print {"error": "..."} and exit 1.
Set WAYFARER_LOG_LEVEL (e.g. DEBUG) to log to stderr.
"""

import json
import logging
import os
import sys

from .errors import WayfarerError
from .tools import invoke_tool


def _fail(message: str) -> None:
    print(json.dumps({"error": message}))
    sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv

    level = os.environ.get("WAYFARER_LOG_LEVEL")
    if level:
        if level.upper() not in logging.getLevelNamesMapping():
            _fail(f"Invalid WAYFARER_LOG_LEVEL: {level}")
        logging.basicConfig(stream=sys.stderr, level=level.upper())

    if len(args) != 1:
        _fail("Usage: wayfarer <request_file.json>")

    request_file = args[0]

    try:
        with open(request_file) as f:
            data = json.load(f)
        result = invoke_tool(data["tool"], data.get("arguments", {}))
    except FileNotFoundError:
        _fail(f"Request file not found: {request_file}")
    except json.JSONDecodeError as e:
        _fail(f"Invalid JSON in request file: {e}")
    except KeyError as e:
        _fail(f"Missing required field: {e}")
    except (WayfarerError, ValueError, TypeError) as e:
        _fail(str(e))
    else:
        print(json.dumps(result))


if __name__ == "__main__":
    main()
