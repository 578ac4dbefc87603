from app.api.v1 import analytics, commits, webhooks

__all__ = [
    "analytics",
    "commits",
    "webhooks",
]
