"""Voting service package."""

from .api import VotingService
from .channel import ChannelState, StatusChannel

__all__ = ["ChannelState", "StatusChannel", "VotingService"]
