"""
Script để chạy PersonaCart API bằng uvicorn.
"""
import uvicorn

from personacart.config import settings

if __name__ == "__main__":
    # Chỉ reload trong development
    uvicorn.run(
        "personacart.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level="info"
    )
