# cloudeats/main.py
import sys

import uvicorn

from cloudeats.api import create_menu_app, create_order_app, create_user_app
from cloudeats.utils.settings import MENU_SERVICE_PORT, ORDER_SERVICE_PORT, USER_SERVICE_PORT
from cloudeats.utils.logging import get_logger

logger = get_logger(__name__)

SERVICES = {
    "order": (create_order_app, ORDER_SERVICE_PORT),
    "user": (create_user_app, USER_SERVICE_PORT),
    "menu": (create_menu_app, MENU_SERVICE_PORT),
}


def run(service: str) -> None:
    factory, port = SERVICES[service]
    logger.info(f"Starting {service}-service on port {port}")
    uvicorn.run(factory(), host="0.0.0.0", port=port)


if __name__ == "__main__":
    name = sys.argv[1] if len(sys.argv) > 1 else "order"
    if name not in SERVICES:
        sys.exit(f"usage: python -m cloudeats.main [{'|'.join(SERVICES)}]")
    run(name)
