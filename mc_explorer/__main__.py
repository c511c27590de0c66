"""Allow running with ``python -m mc_explorer``."""

from mc_explorer.app import main

main()
