"""
Message Router - the chat endpoint's core

One linear pass per chat message: ask the model for a reply, look for a
routing directive in it, resolve the directive against the sender's
approved connections and forward the message when a connection matches.
"""
from typing import Dict, List, Optional

from models.profile import ROLES
from services.ai.prompts import build_system_prompt
from services.helpers.error_handlers import InputError, UpstreamError, PersistenceError
from services.routing.directive_parser import parse_directive
from services.routing.recipient_matcher import match_recipient
from utils.logger import log_info, log_error, log_warning, log_debug


class MessageRouter:
    """Turns one user chat message into a reply and an optional forward"""

    def __init__(self, connection_service, message_service, model_client, config):
        self.connections = connection_service
        self.messages = message_service
        self.model = model_client
        self.config = config

    def _validate(self, message: Optional[str], sender_profile_id: Optional[str],
                  sender_role: Optional[str]):
        if not message or not str(message).strip():
            raise InputError("Missing message or profile_id")
        if not sender_profile_id or not str(sender_profile_id).strip():
            raise InputError("Missing message or profile_id")
        if sender_role and sender_role not in ROLES:
            raise InputError(f"Role must be one of {', '.join(ROLES)}")

    def _load_candidates(self, sender_profile_id: str) -> List[Dict]:
        try:
            return self.connections.get_route_candidates(sender_profile_id)
        except PersistenceError as e:
            log_error(f"Could not load connections for {sender_profile_id}: {str(e)}")
            return []

    def _ask_model(self, message: str, sender_role: Optional[str],
                   candidates: List[Dict]) -> Optional[str]:
        """Raw model output, or None when the model could not help"""
        try:
            return self.model.generate(build_system_prompt(sender_role, candidates), message)
        except UpstreamError as e:
            log_warning(f"Using fallback reply: {str(e)}")
            return None

    def route(self, message: str, sender_profile_id: str,
              sender_role: Optional[str] = None) -> Dict:
        """
        Handle one chat message

        Returns:
            {'reply': str, 'routed': bool, 'recipient_name': Optional[str]}

        Raises:
            InputError: message or sender_profile_id missing, or unknown role.
                Nothing is read or written in that case.
        """
        self._validate(message, sender_profile_id, sender_role)

        candidates = self._load_candidates(sender_profile_id)

        raw_output = self._ask_model(message, sender_role, candidates)
        if raw_output is None:
            reply, directive = self.config.FALLBACK_REPLY, None
        else:
            reply, directive = parse_directive(raw_output)
            log_debug(f"Model reply for {sender_profile_id}: {len(raw_output)} chars, "
                      f"directive={'yes' if directive else 'no'}")
            if not reply.strip():
                # A bare directive leaves nothing to show the user
                reply = self.config.FALLBACK_REPLY

        routed = False
        recipient_name = None

        if directive:
            recipient = match_recipient(directive['recipient'], candidates)
            if recipient is None:
                log_info(f"No approved connection matches the directive from {sender_profile_id} "
                         f"({len(candidates)} candidates)")
            else:
                content = directive.get('content') or message
                try:
                    self.messages.forward_message(sender_profile_id, recipient['id'], content)
                    routed = True
                    recipient_name = recipient['name']
                except PersistenceError as e:
                    log_error(f"Failed to forward message to {recipient['id']}: {str(e)}")

        try:
            self.messages.log_conversation(sender_profile_id, message, reply)
        except PersistenceError as e:
            log_error(f"Failed to log conversation for {sender_profile_id}: {str(e)}")

        log_info(f"Chat handled for {sender_profile_id}: routed={routed}")
        return {
            'reply': reply,
            'routed': routed,
            'recipient_name': recipient_name
        }
