"""Allows `python -m learning_api` to start the server."""

from learning_api.main import run

if __name__ == "__main__":
    run()
