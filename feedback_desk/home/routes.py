from typing import Dict

from litestar import get


@get("/", sync_to_thread=False)
def home() -> Dict[str, str]:
    """Health check."""
    return {"message": "Feedback API is running!"}


routes = [home]
