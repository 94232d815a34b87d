"""Editable static menu and sample-order configuration."""

from __future__ import annotations

RESTAURANT_NAME = "NIDAR"
RESTAURANT_TAGLINE = "Pasta & Burger"

CATEGORY_LABELS: dict[str, str] = {
    "pasta": "Pasta",
    "burger": "Burgers",
}

CATEGORY_PRICE_HINTS: dict[str, str] = {
    "pasta": "All pastas Rs.149",
    "burger": "Burgers Rs.99 - Rs.169",
}

# Catalog order matters: summaries and agent messages list items in this order.
MENU_ENTRIES: list[dict[str, object]] = [
    {"id": "pasta-alfredo", "name": "Classic Alfredo Pasta", "price": 149, "category": "pasta"},
    {"id": "pasta-tandoori", "name": "Tandoori Pasta", "price": 149, "category": "pasta"},
    {"id": "pasta-periperi", "name": "Peri Peri Pasta", "price": 149, "category": "pasta"},
    {"id": "pasta-pinksauce", "name": "Pink Sauce Pasta", "price": 149, "category": "pasta"},
    {"id": "pasta-arabiata", "name": "Arabiata Pasta", "price": 149, "category": "pasta"},
    {"id": "pasta-macncheese", "name": "Mac & Cheese Pasta", "price": 149, "category": "pasta"},
    {"id": "burger-classic", "name": "Classic Burger", "price": 99, "category": "burger"},
    {"id": "burger-tandoori", "name": "Tandoori Burger", "price": 119, "category": "burger"},
    {"id": "burger-periperi", "name": "Peri Peri Burger", "price": 119, "category": "burger"},
    {"id": "burger-doublepatty", "name": "Double Patty Burger", "price": 159, "category": "burger"},
    {"id": "burger-cheeseburst", "name": "Cheese Burst Burger", "price": 139, "category": "burger"},
    {"id": "burger-loaded", "name": "Loaded Burger", "price": 169, "category": "burger"},
]

SAMPLE_ORDER_FIELDS: dict[str, object] = {
    "customer_name": "Rahul Sharma",
    "phone": "9876543210",
    "items": {
        "pasta-alfredo": 2,
        "burger-tandoori": 1,
        "burger-cheeseburst": 1,
    },
    "special_instructions": "Extra cheese on the pasta, please. No onions in the burgers.",
}

SAMPLE_CONFIRMATION_FIELDS: dict[str, object] = {
    "whatsapp_message": (
        "NEW ORDER - NIDAR Pasta & Burger\n\n"
        "Order ID: NID-A7K2M\n"
        "Customer: Rahul Sharma\n"
        "Phone: 9876543210\n"
        "Arrival: 10:30 PM\n\n"
        "Items:\n"
        "2x Classic Alfredo Pasta - Rs.298\n"
        "1x Tandoori Burger - Rs.119\n"
        "1x Cheese Burst Burger - Rs.139\n\n"
        "Total: Rs.556\n\n"
        "Special Instructions: Extra cheese on the pasta, please. No onions in the burgers."
    ),
    "order_id": "NID-A7K2M",
    "total_price": 556,
    "customer_name": "Rahul Sharma",
    "arrival_time": "10:30 PM",
}
