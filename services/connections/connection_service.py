"""
Connection Service - social graph operations
Requests, approvals and lookups over the connections table
"""
from typing import Dict, List, Optional
from datetime import datetime
import pytz

from models.profile import ProfileModel, PROFILE_COLUMNS
from services.helpers.error_handlers import (
    store_operation, InputError, NotFoundError, PermissionDeniedError
)
from utils.logger import log_info, log_warning

CONNECTION_SELECT = (
    'id, status, requester_id, requested_id, created_at, '
    f'requester:profiles!connections_requester_id_fkey({PROFILE_COLUMNS}), '
    f'requested:profiles!connections_requested_id_fkey({PROFILE_COLUMNS})'
)

STATUS_PENDING = 'pending'
STATUS_APPROVED = 'approved'
STATUS_REJECTED = 'rejected'
RESPONSE_ACTIONS = (STATUS_APPROVED, STATUS_REJECTED)


class ConnectionService:
    """Manages connections between profiles"""

    def __init__(self, supabase_client, config):
        self.db = supabase_client
        self.config = config
        self.tz = pytz.timezone(config.TIMEZONE)
        self.profiles = ProfileModel(supabase_client, config)

    @store_operation('fetch_connections')
    def _fetch_connections(self, profile_id: str, status: Optional[str] = None) -> List[Dict]:
        """All edges where the profile is either endpoint"""
        query = self.db.table('connections').select(CONNECTION_SELECT).or_(
            f'requester_id.eq.{profile_id},requested_id.eq.{profile_id}'
        )
        if status:
            query = query.eq('status', status)

        result = query.execute()
        return result.data if result.data else []

    @staticmethod
    def _other_party(connection: Dict, profile_id: str) -> Optional[Dict]:
        requester = connection.get('requester') or {}
        requested = connection.get('requested') or {}
        if requester.get('id') == profile_id:
            return requested or None
        if requested.get('id') == profile_id:
            return requester or None

        # Embedded profiles missing, fall back to the raw foreign keys
        if connection.get('requester_id') == profile_id:
            return requested or None
        return requester or None

    def get_route_candidates(self, profile_id: str) -> List[Dict]:
        """
        Get the approved contacts a message from this profile can reach

        Returns:
            List of {id, name, relationship, role, mission_name}, in the
            order the store returned the connections
        """
        candidates = []
        seen = set()

        for connection in self._fetch_connections(profile_id, STATUS_APPROVED):
            if connection.get('status') != STATUS_APPROVED:
                continue

            other = self._other_party(connection, profile_id)
            if not other or not other.get('id') or other['id'] in seen:
                continue

            seen.add(other['id'])
            candidates.append({
                'id': other['id'],
                'name': ProfileModel.display_name(other),
                'relationship': other.get('relationship'),
                'role': other.get('role'),
                'mission_name': other.get('mission_name'),
            })

        log_info(f"Found {len(candidates)} route candidates for profile {profile_id}")
        return candidates

    def list_connections(self, profile_id: str) -> Dict:
        """Approved connections plus pending requests addressed to the profile"""
        if not profile_id:
            raise InputError("Missing profile_id")

        approved = []
        pending = []
        for connection in self._fetch_connections(profile_id):
            status = connection.get('status')
            entry = {
                'id': connection.get('id'),
                'status': status,
                'created_at': connection.get('created_at'),
                'profile': self._other_party(connection, profile_id),
            }
            if status == STATUS_APPROVED:
                approved.append(entry)
            elif status == STATUS_PENDING and connection.get('requested_id') == profile_id:
                pending.append(entry)

        return {'approved': approved, 'pending': pending}

    @store_operation('find_pair')
    def _find_active_pair(self, first_id: str, second_id: str) -> Optional[Dict]:
        """Pending or approved edge between two profiles, in either direction"""
        result = self.db.table('connections').select('id, status, requester_id, requested_id').or_(
            f'and(requester_id.eq.{first_id},requested_id.eq.{second_id}),'
            f'and(requester_id.eq.{second_id},requested_id.eq.{first_id})'
        ).in_('status', [STATUS_PENDING, STATUS_APPROVED]).execute()

        if result.data:
            return result.data[0]
        return None

    @store_operation('request_connection')
    def request_connection(self, requester_id: str, requested_id: str) -> Dict:
        """Create a pending connection request"""
        if not requester_id or not requested_id:
            raise InputError("Missing requester_id or requested_id")
        if requester_id == requested_id:
            raise InputError("A profile cannot connect to itself")

        # Raises NotFoundError for an unknown target
        self.profiles.get_by_id(requested_id)

        existing = self._find_active_pair(requester_id, requested_id)
        if existing:
            raise InputError(f"Connection already {existing.get('status')}")

        record = {
            'requester_id': requester_id,
            'requested_id': requested_id,
            'status': STATUS_PENDING,
            'created_at': datetime.now(self.tz).isoformat()
        }
        result = self.db.table('connections').insert(record).execute()

        log_info(f"Connection requested: {requester_id} -> {requested_id}")
        return result.data[0] if result.data else record

    @store_operation('respond_to_request')
    def respond_to_request(self, connection_id: str, profile_id: str, action: str) -> Dict:
        """Approve or reject a pending request addressed to the profile"""
        if not connection_id or not profile_id:
            raise InputError("Missing connection id or profile_id")
        if action not in RESPONSE_ACTIONS:
            raise InputError(f"Action must be one of {', '.join(RESPONSE_ACTIONS)}")

        result = self.db.table('connections').select(
            'id, status, requester_id, requested_id'
        ).eq('id', connection_id).limit(1).execute()

        if not result.data:
            raise NotFoundError(f"Connection {connection_id} not found")

        connection = result.data[0]
        if connection.get('requested_id') != profile_id:
            log_warning(f"Profile {profile_id} tried to answer connection {connection_id}")
            raise PermissionDeniedError("Only the requested profile can respond")
        if connection.get('status') != STATUS_PENDING:
            raise InputError(f"Connection is already {connection.get('status')}")

        self.db.table('connections').update({
            'status': action
        }).eq('id', connection_id).execute()

        log_info(f"Connection {connection_id} {action} by {profile_id}")
        return {**connection, 'status': action}

    def search_profiles(self, search_term: str, exclude_profile_id: Optional[str] = None,
                        limit: Optional[int] = None) -> List[Dict]:
        """Find profiles to connect with"""
        if not search_term:
            return []
        limit = limit or getattr(self.config, 'PROFILE_SEARCH_LIMIT', 10)
        return self.profiles.search_by_name(search_term, exclude_profile_id, limit)
