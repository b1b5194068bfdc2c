"""
Vote rules: validation, recording, tallying and the elimination pick.
"""

from enum import Enum
from typing import Dict, List, Optional
from dataclasses import dataclass

from .registry import PlayerRegistry


class VoteError(Enum):
    """Why a vote was not recorded."""
    INVALID_VOTE_TARGET = "invalid_vote_target"
    ILLEGAL_STATE_TRANSITION = "illegal_state_transition"


@dataclass
class VoteResult:
    """Result of a vote attempt."""
    success: bool
    voter: Optional[int] = None
    target: Optional[int] = None
    error: Optional[VoteError] = None
    message: str = ""
    previous_target: Optional[int] = None  # Target of the vote this one replaced


def validate_vote(registry: PlayerRegistry, voter_id: int, target_id: int) -> VoteResult:
    """Check a vote against the roster without recording it."""
    voter = registry.by_id(voter_id)
    if not voter or not voter.is_alive:
        return VoteResult(
            success=False, voter=voter_id, target=target_id,
            error=VoteError.INVALID_VOTE_TARGET,
            message=f"Player {voter_id} cannot vote"
        )

    if voter_id == target_id:
        return VoteResult(
            success=False, voter=voter_id, target=target_id,
            error=VoteError.INVALID_VOTE_TARGET,
            message="You cannot vote for yourself"
        )

    target = registry.by_id(target_id)
    if not target or not target.is_alive:
        return VoteResult(
            success=False, voter=voter_id, target=target_id,
            error=VoteError.INVALID_VOTE_TARGET,
            message=f"Player {target_id} is not available for voting"
        )

    return VoteResult(success=True, voter=voter_id, target=target_id, message="Accepted")


def record_vote(registry: PlayerRegistry, voter_id: int, target_id: int) -> VoteResult:
    """
    Validate and record a vote.

    A second vote from the same voter replaces the first one, so the old
    target loses the vote it had received.
    """
    result = validate_vote(registry, voter_id, target_id)
    if not result.success:
        return result

    voter = registry.by_id(voter_id)
    if voter.vote is not None:
        previous = registry.by_id(voter.vote)
        if previous:
            previous.withdraw_vote()
        result.previous_target = voter.vote

    voter.vote = target_id
    registry.by_id(target_id).receive_vote()
    return result


def get_vote_counts(registry: PlayerRegistry) -> Dict[int, int]:
    """Get vote counts for alive players that received at least one vote."""
    return {p.player_id: p.vote_count for p in registry.all_alive() if p.vote_count > 0}


def get_voters(registry: PlayerRegistry, target_id: int) -> List[int]:
    """Get ids of players whose recorded vote is for a target."""
    return [p.player_id for p in registry.filter(lambda p: p.vote == target_id)]


def find_elimination_target(registry: PlayerRegistry) -> Optional[int]:
    """
    Pick the player to eliminate.

    Walks the roster in seat order and keeps the first alive player whose
    count is strictly above the best seen so far. A tie goes to the earlier
    seat; no votes at all means no elimination.
    """
    max_votes = 0
    target = None
    for player in registry:
        if player.is_alive and player.vote_count > max_votes:
            max_votes = player.vote_count
            target = player.player_id
    return target
