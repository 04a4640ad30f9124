# python -m mylife_backend
import uvicorn

from mylife_backend.app.config import API_HOST, API_PORT, DEBUG_MODE, LOG_LEVEL

def main() -> None:
    uvicorn.run(
        "mylife_backend.app.main:app",
        host=API_HOST,
        port=API_PORT,
        reload=DEBUG_MODE,
        log_level=LOG_LEVEL.lower(),
    )

if __name__ == "__main__":
    main()
