"""
Routing Services
Decides whether a chat message should reach one of the sender's connections
"""

from .directive_parser import parse_directive
from .recipient_matcher import match_recipient
from .message_router import MessageRouter

__all__ = ['parse_directive', 'match_recipient', 'MessageRouter']
