"""
Run the service: ``python -m receipt_processor``.
"""
import uvicorn

from receipt_processor.config import settings


def main() -> None:
    uvicorn.run(
        "receipt_processor.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
