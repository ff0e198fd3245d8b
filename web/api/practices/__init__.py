"""Practice API."""

from web.api.practices.views import get_strategic_view

__all__ = ["get_strategic_view"]
