"""Generate the OpenAPI schema from the FastAPI app.

Prints to stdout, or writes to the path given as the first argument.
"""

import json
import sys
from pathlib import Path

from app.main import app


def generate_openapi() -> dict:
    return app.openapi()


def main(argv: list[str]) -> int:
    document = json.dumps(generate_openapi(), indent=2)
    if argv:
        Path(argv[0]).write_text(document + "\n", encoding="utf-8")
    else:
        print(document)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
