"""Package entry point.

Allows running the CLI as: python -m hourglass
"""

from hourglass.cli.main import cli_main

if __name__ == "__main__":
    cli_main()
