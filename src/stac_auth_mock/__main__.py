import uvicorn
from uvicorn.config import LOGGING_CONFIG

from .config import Settings

LOGGING_CONFIG["loggers"]["stac_auth_mock"] = {
    "level": "DEBUG",
    "handlers": ["default"],
}


def main():
    settings = Settings()
    uvicorn.run(
        "stac_auth_mock.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_config=LOGGING_CONFIG,
    )


if __name__ == "__main__":
    main()
