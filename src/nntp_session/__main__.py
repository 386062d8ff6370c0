"""Entry point for `python -m nntp_session`."""

from .cli import main

if __name__ == "__main__":
    main()
