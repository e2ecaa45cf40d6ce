from config import Config
from models import init_supabase
from services.ai.model_client import ModelClient
from services.connections import ConnectionService
from services.messages import MessageService
from services.routing import MessageRouter
from utils.logger import log_info, log_error, setup_logger
from utils.input_sanitizer import InputSanitizer


def build_services(supabase, config, model_client=None):
    """Wire the services around an existing Supabase client"""
    connection_service = ConnectionService(supabase, config)
    message_service = MessageService(supabase, config)
    model_client = model_client or ModelClient(config)

    message_router = MessageRouter(
        connection_service,
        message_service,
        model_client,
        config
    )

    return {
        'connections': connection_service,
        'messages': message_service,
        'model_client': model_client,
        'message_router': message_router,
        'input_sanitizer': InputSanitizer(config)
    }


def setup_app_core(app, config=Config, services=None, supabase=None):
    """Initialize core services and store them in the app config"""
    setup_logger()

    if services is None:
        # Only setup the services if we have the required environment variables
        if supabase is None and config.SUPABASE_URL and config.SUPABASE_SERVICE_KEY:
            try:
                supabase = init_supabase(config.SUPABASE_URL, config.SUPABASE_SERVICE_KEY)
            except Exception as e:
                log_error(f"Supabase unavailable, starting degraded: {str(e)}")

        if supabase is not None:
            services = build_services(supabase, config)
        else:
            log_error("Supabase credentials not found. Chat and connection services disabled.")
            services = {'input_sanitizer': InputSanitizer(config)}

    app.config['services'] = services
    app.config['supabase'] = supabase

    log_info(f"Core services ready: {', '.join(sorted(services))}")
    return app
