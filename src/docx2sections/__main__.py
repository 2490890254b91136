"""Module entry point for running with python -m docx2sections."""

import sys

from docx2sections.cli import main

if __name__ == "__main__":
    sys.exit(main())
