import uvicorn

from .config import LOG_LEVEL, PORT

if __name__ == "__main__":
    uvicorn.run("ballot.main:app", host="0.0.0.0", port=PORT, log_level=LOG_LEVEL.lower())
