"""Command-line decoder for backend payloads.

Usage:
    shadow-decode commands.CreateUserResult '{"id": "u1", "name": "Ada"}'
    echo '{"id": "u2"}' | shadow-decode queries.GetUserResult
    shadow-decode --list
"""

import sys

from shared.exceptions import AppError, NotFoundError
from shared.logging import setup_logging
from users.application.services import available_models, decode_payload

USAGE = "usage: shadow-decode (--list | <namespace.Model> [payload])"


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    # stdout carries the decoded document only
    setup_logging(sys.stderr)

    if args == ["--list"]:
        for name in available_models():
            print(name)
        return 0

    if not 1 <= len(args) <= 2:
        print(USAGE, file=sys.stderr)
        return 2

    name = args[0]
    payload = args[1] if len(args) == 2 else sys.stdin.read()

    try:
        instance = decode_payload(name, payload)
    except NotFoundError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        print(f"known models: {', '.join(available_models())}", file=sys.stderr)
        return 2
    except AppError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        for error in getattr(exc, "errors", []):
            print(f"  {error['field']}: {error['message']}", file=sys.stderr)
        return 1

    print(instance.to_json())
    return 0


if __name__ == "__main__":
    sys.exit(main())
