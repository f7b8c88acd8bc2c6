"""schema 包测试 fixtures"""

from typing import Any

import pytest


@pytest.fixture
def register_customer_slice() -> dict[str, Any]:
    """最小 StateChange 切片：无 businessRules、无 invariants"""
    return {
        "name": "RegisterCustomer slice",
        "type": "stateChange",
        "trigger": {"source": "ui"},
        "stream": "customer-{id}",
        "command": "RegisterCustomer",
        "events": ["CustomerRegistered"],
    }


@pytest.fixture
def minimal_slices() -> dict[str, dict[str, Any]]:
    """四种切片各自的最小合法候选"""
    return {
        "stateChange": {
            "type": "stateChange",
            "name": "Register Customer",
            "trigger": {"source": "ui"},
            "stream": "customer-{customerId}",
            "command": "RegisterCustomer",
            "events": ["CustomerRegistered"],
        },
        "stateView": {
            "type": "stateView",
            "name": "Customer Profile",
            "trigger": {"source": "api"},
            "events": ["CustomerRegistered"],
        },
        "automation": {
            "type": "automation",
            "name": "Order Fulfillment",
            "trigger": {"type": "event"},
            "commands": ["FulfillOrder"],
        },
        "translation": {
            "type": "translation",
            "name": "Payment Gateway Events",
            "source": "Stripe",
            "externalEvent": "payment_intent.succeeded",
            "internalEvents": ["PaymentReceived"],
        },
    }


@pytest.fixture
def place_order_rule() -> dict[str, Any]:
    """完整的 Given/When/Then 业务规则"""
    return {
        "given": [
            {
                "eventName": "ProductAddedToInventory",
                "exampleData": {"productId": "PROD-001", "quantity": 100},
            }
        ],
        "when": {
            "type": "command",
            "name": "PlaceOrder",
            "exampleData": {"orderId": "ORD-2024-001", "totalAmount": 59.98},
        },
        "then": [
            {"type": "event", "name": "OrderPlaced"},
            {"type": "state", "name": "OrderSummary"},
        ],
    }
