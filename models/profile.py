from typing import Dict, Optional, List

from services.helpers.error_handlers import store_operation, NotFoundError

PROFILE_COLUMNS = 'id, full_name, role, mission_name, relationship'
ROLES = ('astronaut', 'relative')


class ProfileModel:
    """Read access to the profiles table"""

    def __init__(self, supabase_client, config):
        self.db = supabase_client
        self.config = config

    @store_operation('get_profile')
    def get_by_id(self, profile_id: str) -> Dict:
        """Get a profile by ID"""
        result = self.db.table('profiles').select(PROFILE_COLUMNS).eq(
            'id', profile_id
        ).limit(1).execute()

        if not result.data:
            raise NotFoundError(f"Profile {profile_id} not found")
        return result.data[0]

    @store_operation('search_profiles')
    def search_by_name(self, search_term: str, exclude_id: Optional[str] = None,
                       limit: int = 10) -> List[Dict]:
        """Search profiles whose full name contains the term"""
        query = self.db.table('profiles').select(PROFILE_COLUMNS).ilike(
            'full_name', f'%{search_term}%'
        )
        if exclude_id:
            query = query.neq('id', exclude_id)

        result = query.order('full_name').limit(limit).execute()
        return result.data if result.data else []

    @staticmethod
    def display_name(profile: Optional[Dict]) -> str:
        """Name shown to other users"""
        if not profile:
            return ''
        return (profile.get('full_name') or '').strip()
