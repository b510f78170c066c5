"""Start the pricing profiles API with uvicorn, using the configured host and port."""
import uvicorn

from pricing_profiles.config.settings import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "pricing_profiles.api.main:build_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )


if __name__ == "__main__":
    main()
