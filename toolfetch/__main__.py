"""
Entry point for running toolfetch CLI as a module.

Usage: python -m toolfetch [command] [options]
"""

from toolfetch.cli.parser import main

if __name__ == "__main__":
    main()
