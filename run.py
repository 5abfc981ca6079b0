"""Entry point for running Quotaday from a source checkout.

Intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.  It accepts
the same arguments as the ``quotaday`` command.

Configuration such as PORT, MAX_QUOTES or LOG_LEVEL is read from the
environment.

Usage:
    python run.py --port 8080
    python run.py version
"""
import sys

from quotaday_api.cli import main


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pass
