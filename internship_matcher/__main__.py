"""
Main entry point for the internship_matcher package.

Usage:
    python -m internship_matcher [command] [options]

See 'python -m internship_matcher --help' for available commands.
"""

from internship_matcher.cli import main

if __name__ == "__main__":
    main()
