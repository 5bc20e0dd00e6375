# run_dev.py
"""
Local development launcher for FastAPI.
Equivalent to: `uvicorn codeai.app:app --reload --host $HOST --port $PORT`
"""

import uvicorn

from codeai.settings import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "codeai.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
