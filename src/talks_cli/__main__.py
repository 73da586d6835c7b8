"""
Entry point for running Talks CLI as a module.

This allows users to run the CLI using:
    python -m talks_cli [command] [options]
"""

from talks_cli.cli.app import main

if __name__ == "__main__":
    main()
