"""
Allow running the package with: python -m duplicate_file_finder

Examples:
    python -m duplicate_file_finder /path/to/files   # Validate and scan
"""

import sys

from .cli import main


if __name__ == '__main__':
    sys.exit(main())
