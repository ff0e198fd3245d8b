"""Committee API."""

from web.api.committees.views import (
    create_committee,
    delete_committee,
    get_committee,
    list_candidates,
    list_committees,
    update_committee,
)

__all__ = [
    "list_committees",
    "get_committee",
    "create_committee",
    "update_committee",
    "delete_committee",
    "list_candidates",
]
