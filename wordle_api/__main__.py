# Entry point: python -m wordle_api

import logging
import uvicorn
from .config import HOST, PORT, LOG_LEVEL

def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("wordle_api.main:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())

if __name__ == "__main__":
    main()
