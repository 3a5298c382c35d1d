"""Entry point for running scripts: python -m swiftwash.scripts"""

from swiftwash.scripts.cli import cli

if __name__ == "__main__":
    cli()
