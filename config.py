import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # Basic Flask config
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'your-secret-key'
    PORT = int(os.environ.get('PORT', '5000'))

    # Supabase config
    SUPABASE_URL = os.environ.get('SUPABASE_URL')
    SUPABASE_SERVICE_KEY = os.environ.get('SUPABASE_SERVICE_KEY')

    # AI config
    ANTHROPIC_API_KEY = os.environ.get('ANTHROPIC_API_KEY')
    AI_MODEL = os.environ.get('AI_MODEL', 'claude-sonnet-4-20250514')
    AI_MAX_TOKENS = int(os.environ.get('AI_MAX_TOKENS', '400'))
    AI_TEMPERATURE = float(os.environ.get('AI_TEMPERATURE', '0.7'))
    AI_TIMEOUT = float(os.environ.get('AI_TIMEOUT', '30'))

    # Reply used whenever the model cannot be reached or says nothing usable
    FALLBACK_REPLY = os.environ.get(
        'FALLBACK_REPLY',
        "I'm here for you. It sounds like you're going through something. "
        "Tell me more, and I'll listen."
    )

    # Chat input limits
    MAX_MESSAGE_LENGTH = int(os.environ.get('MAX_MESSAGE_LENGTH', '2000'))
    PROFILE_SEARCH_LIMIT = int(os.environ.get('PROFILE_SEARCH_LIMIT', '10'))

    # Other settings
    TIMEZONE = os.environ.get('TIMEZONE', 'UTC')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
    SERVICE_NAME = 'Stellar Link'
