"""Run the customer API with uvicorn on API_HOST:API_PORT."""

import uvicorn

from customer_service.config import Settings
from customer_service.main import create_app


def main() -> None:
    settings = Settings()
    uvicorn.run(
        create_app(settings),
        host=settings.api_host,
        port=settings.api_port_number,
        log_config=None,
    )


if __name__ == "__main__":
    main()
