# SPDX-License-Identifier: MIT
"""Enable `python -m htmlelement` invocation."""
from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
