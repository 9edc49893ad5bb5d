"""awswire CLI bootstrap."""

from awswire.cli import app

if __name__ == "__main__":
    app()
