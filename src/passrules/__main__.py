"""Entry point for 'python -m passrules' command."""

from passrules.cli import main

if __name__ == "__main__":
    main()
