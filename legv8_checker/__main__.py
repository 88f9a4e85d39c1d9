"""Package entry point for ``python -m legv8_checker``.

WHY: Users run the checker as ``python -m legv8_checker prog.s`` for CLI
mode, or ``python -m legv8_checker --serve`` to start the HTTP API.

HOW: Checks sys.argv for the ``--serve`` flag. If present, starts the
uvicorn server. Otherwise, delegates to the CLI's main() function.

RULES:
- ``--serve`` starts the HTTP API on the configured host/port
- Without ``--serve``, falls through to the CLI
"""

import sys

if __name__ == "__main__":
    if "--serve" in sys.argv:
        from legv8_checker.server.app import run_api
        run_api()
    else:
        from legv8_checker.cli import main
        sys.exit(main())
