"""Entry point for python -m lease_contracts"""

from lease_contracts.cli.main import app

if __name__ == "__main__":
    app()
