"""Entry point for 'python -m tasklist' command."""

from tasklist.cli import main

if __name__ == "__main__":
    main()
