"""Allow ``python -m jakel``."""

from jakel.cli.main import main

main()
