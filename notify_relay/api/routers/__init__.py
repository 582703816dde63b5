"""
API router modules.

- notify: /send, relays messages to Telegram
- subscribe: /subscribe, relays newsletter signups to beehiiv
"""

from notify_relay.api.routers.notify import router as notify_router
from notify_relay.api.routers.subscribe import router as subscribe_router

__all__ = [
    "notify_router",
    "subscribe_router",
]
