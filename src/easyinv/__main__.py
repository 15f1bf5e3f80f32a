"""Allow running the service with ``python -m easyinv``."""

from easyinv.app import main

main()
