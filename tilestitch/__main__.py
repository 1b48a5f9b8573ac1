"""Allow running as ``python -m tilestitch``."""

from .cli import main

main()
