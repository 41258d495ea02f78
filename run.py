# run.py
import uvicorn

from config import API_PORT

if __name__ == "__main__":
    uvicorn.run(
        "api:create_api_app",
        factory=True,
        host="0.0.0.0",
        port=API_PORT,
        reload=False,
        log_level="info"
    )
