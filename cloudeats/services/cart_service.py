# cloudeats/services/cart_service.py
from decimal import Decimal
from typing import Any, Dict, List

import redis

from cloudeats.domain.errors import NotFound
from cloudeats.repos.cart_repo import CartRepo
from cloudeats.utils.settings import CART_TTL_SECONDS
from cloudeats.utils.logging import get_logger

logger = get_logger(__name__)


def empty_cart() -> Dict[str, Any]:
    return {"items": [], "total": 0}


def cart_total(items: List[Dict[str, Any]]) -> float | int:
    #summed as Decimal, 0.1 + 0.2 == 0.3 here
    total = sum(
        (Decimal(str(i["price"])) * i["quantity"] for i in items),
        Decimal("0"),
    )
    if total == total.to_integral_value():
        return int(total)
    return float(total)


def _find_item(items: List[Dict[str, Any]], item_id: int) -> int:
    for index, item in enumerate(items):
        if item["itemId"] == item_id:
            return index
    return -1


class CartService:
    """
    Cart kept in Redis under cart:user:<user_id>.

    commands (add, update, clear) rewrite the whole record and slide the TTL
    query (get) is read only and never fails on a miss

    Read-modify-write is not atomic, two writers for the same user race
    and the last one wins.
    """

    def __init__(self, cache: redis.Redis, ttl: int = CART_TTL_SECONDS):
        self.repo = CartRepo(cache)
        self.ttl = ttl

    #query
    def get_cart(self, user_id: int) -> Dict[str, Any]:
        cart = self.repo.get_cart(user_id)
        if cart is None:
            return empty_cart()
        return cart

    #commands
    def add_item(
        self,
        user_id: int,
        item_id: int,
        item_name: str,
        price: float,
        quantity: int,
    ) -> Dict[str, Any]:
        cart = self.get_cart(user_id)
        items = cart["items"]

        index = _find_item(items, item_id)

        if index >= 0:
            logger.info(
                f"Item {item_id} already in cart of user {user_id}, quantity "
                f"{items[index]['quantity']} -> {items[index]['quantity'] + quantity}"
            )
            items[index]["quantity"] += quantity
        else:
            logger.info(f"Adding item {item_id} to cart of user {user_id}")
            items.append(
                {
                    "itemId": item_id,
                    "itemName": item_name,
                    "price": price,
                    "quantity": quantity,
                }
            )

        cart["total"] = cart_total(items)
        self.repo.save_cart(user_id, cart, self.ttl)

        return cart

    def update_item_quantity(self, user_id: int, item_id: int, quantity: int) -> Dict[str, Any]:
        cart = self.repo.get_cart(user_id)

        if cart is None:
            raise NotFound("Cart not found")

        items = cart["items"]
        index = _find_item(items, item_id)

        if index == -1:
            raise NotFound("Item not found in cart")

        if quantity <= 0:
            logger.info(f"Removing item {item_id} from cart of user {user_id}")
            items.pop(index)
        else:
            items[index]["quantity"] = quantity

        cart["total"] = cart_total(items)
        self.repo.save_cart(user_id, cart, self.ttl)

        return cart

    def clear_cart(self, user_id: int) -> None:
        self.repo.delete_cart(user_id)
        logger.info(f"Cart of user {user_id} cleared")
