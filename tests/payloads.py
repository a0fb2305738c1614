# Shared order payloads for the engine tests.

PLATFORM_ORDER = {
    "name": "#1001",
    "tags": ["21/06/2025", "09:30-11:30", "urgent"],
    "note": "Add a card: Happy birthday",
    "displayFulfillmentStatus": "UNFULFILLED",
    "lineItems": {
        "edges": [
            {
                "node": {
                    "title": "Rose Bouquet",
                    "variant": {"title": "Large", "id": "gid://shopify/ProductVariant/2"},
                    "product": {"id": "gid://shopify/Product/1"},
                }
            },
            {"node": {"title": "Vase", "variant": {"title": "Glass"}}},
        ]
    },
    "localProduct": {
        "labelNames": ["Hard", "Bouquet"],
        "labelCategories": ["difficulty", "productType"],
    },
}

STORED_ORDER = {
    "id": "ord-1",
    "assignedFloristId": "u1",
    "status": "assigned",
    "shopifyOrderData": PLATFORM_ORDER,
}

LOCAL_ORDER = {
    "id": "42",
    "productName": "Tulips",
    "productVariant": "Small",
    "timeslot": "14:00-16:00",
    "difficultyLabel": "Easy",
    "remarks": "Leave at reception",
    "productCustomizations": "No lilies",
    "status": "pending",
    "orderTags": "urgent, fragile",
}

USERS = [{"id": "u1", "name": "Alice"}, {"id": "u2", "name": "Bob"}]

LABELS = [
    {"id": "l1", "name": "Hard", "color": "#ef4444", "category": "difficulty", "priority": 1},
    {"id": "l2", "name": "Easy", "color": "#22c55e", "category": "difficulty", "priority": 2},
    {"id": "l3", "name": "Bouquet", "color": "#3b82f6", "category": "productType", "priority": 1},
]
