"""Allow ``python -m er_save_copy``."""

from .app import main

main()
