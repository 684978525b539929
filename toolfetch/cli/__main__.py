"""
Entry point for running toolfetch CLI as a module.

Usage: python -m toolfetch.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
