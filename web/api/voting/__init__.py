"""Voting API."""

from web.api.voting.views import cast_vote, get_open_ballots, get_voting_context

__all__ = [
    "get_open_ballots",
    "get_voting_context",
    "cast_vote",
]
