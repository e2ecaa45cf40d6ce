"""
Message Services
Forwarded messages between connected profiles and the AI conversation log
"""

from .message_service import MessageService

__all__ = ['MessageService']
