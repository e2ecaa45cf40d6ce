"""
Message Service - forwarded messages and the AI conversation log
"""
from typing import Dict, List
from datetime import datetime
import pytz

from services.helpers.error_handlers import (
    store_operation, InputError, NotFoundError, PermissionDeniedError
)
from utils.logger import log_info

MESSAGE_SELECT = (
    'id, sender_id, recipient_id, content, created_at, read_at, '
    'sender:profiles!routed_messages_sender_id_fkey(full_name, role), '
    'recipient:profiles!routed_messages_recipient_id_fkey(full_name)'
)


class MessageService:
    """Handle routed_messages and ai_conversations records"""

    def __init__(self, supabase_client, config):
        self.db = supabase_client
        self.config = config
        self.tz = pytz.timezone(config.TIMEZONE)

    def _now(self) -> str:
        return datetime.now(self.tz).isoformat()

    @store_operation('forward_message')
    def forward_message(self, sender_id: str, recipient_id: str, content: str) -> Dict:
        """Store a message routed from one profile to a connected one"""
        record = {
            'sender_id': sender_id,
            'recipient_id': recipient_id,
            'content': content,
            'created_at': self._now()
        }
        result = self.db.table('routed_messages').insert(record).execute()

        log_info(f"Forwarded message {sender_id} -> {recipient_id} ({len(content)} chars)")
        return result.data[0] if result.data else record

    @store_operation('log_conversation')
    def log_conversation(self, profile_id: str, message: str, reply: str) -> Dict:
        """Append one exchange with the assistant to the conversation log"""
        record = {
            'user_id': profile_id,
            'message': message,
            'response': reply,
            'created_at': self._now()
        }
        result = self.db.table('ai_conversations').insert(record).execute()
        return result.data[0] if result.data else record

    @store_operation('list_messages')
    def list_messages(self, profile_id: str) -> List[Dict]:
        """Messages sent or received by the profile, newest first"""
        if not profile_id:
            raise InputError("Missing profile_id")

        result = self.db.table('routed_messages').select(MESSAGE_SELECT).or_(
            f'sender_id.eq.{profile_id},recipient_id.eq.{profile_id}'
        ).order('created_at', desc=True).execute()

        messages = result.data if result.data else []
        for message in messages:
            message['direction'] = 'received' if message.get('recipient_id') == profile_id else 'sent'
        return messages

    @store_operation('unread_count')
    def unread_count(self, profile_id: str) -> int:
        """Number of received messages not yet marked read"""
        if not profile_id:
            raise InputError("Missing profile_id")

        result = self.db.table('routed_messages').select('id').eq(
            'recipient_id', profile_id
        ).is_('read_at', 'null').execute()

        return len(result.data) if result.data else 0

    @store_operation('mark_read')
    def mark_read(self, message_id: str, profile_id: str) -> Dict:
        """
        Set the read marker on a received message

        Only the recipient may mark a message. A message that is already
        read keeps its original timestamp.
        """
        if not message_id or not profile_id:
            raise InputError("Missing message id or profile_id")

        result = self.db.table('routed_messages').select(
            'id, sender_id, recipient_id, read_at'
        ).eq('id', message_id).limit(1).execute()

        if not result.data:
            raise NotFoundError(f"Message {message_id} not found")

        message = result.data[0]
        if message.get('recipient_id') != profile_id:
            raise PermissionDeniedError("Only the recipient can mark a message read")
        if message.get('read_at'):
            return message

        read_at = self._now()
        self.db.table('routed_messages').update({
            'read_at': read_at
        }).eq('id', message_id).is_('read_at', 'null').execute()

        return {**message, 'read_at': read_at}
