"""Allow ``python -m foldbench``."""

from .cli.main import main

main()
