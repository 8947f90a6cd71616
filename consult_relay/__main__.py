"""Run the server with uvicorn: ``python -m consult_relay``."""

import uvicorn

from .config import HOST, PORT, SERVER_RELOAD


def main() -> None:
    uvicorn.run("consult_relay.server:app", host=HOST, port=PORT, reload=SERVER_RELOAD)


if __name__ == "__main__":
    main()
