"""
Connection Services
Handles the social graph between astronauts and relatives: requests,
approvals and the approved contacts a message can be routed to
"""

from .connection_service import ConnectionService

__all__ = ['ConnectionService']
