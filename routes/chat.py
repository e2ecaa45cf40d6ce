from flask import Blueprint, request, jsonify, current_app
from services.helpers.error_handlers import InputError, error_response
from utils.logger import log_info, log_error

chat_bp = Blueprint('chat', __name__)


def get_service(name: str):
    """Look up a service registered by setup_app_core"""
    return (current_app.config.get('services') or {}).get(name)


def get_json_body() -> dict:
    """Request body as a dict; anything that is not a JSON object counts as empty"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return {}
    return data


@chat_bp.route('/chat', methods=['POST'])
def chat():
    """Reply to a chat message and forward it when it is meant for a connection"""
    router = get_service('message_router')
    sanitizer = get_service('input_sanitizer')
    if router is None or sanitizer is None:
        return jsonify({'error': 'Chat service is not configured'}), 503

    try:
        data = get_json_body()
        # Stored and forwarded exactly as sent
        message = sanitizer.check_message(data.get('message'))
        profile_id = sanitizer.sanitize_id(data.get('profile_id'))
        role = data.get('role') or None

        log_info(f"Chat request from {profile_id or 'unknown'} ({len(message)} chars)")
        result = router.route(message, profile_id, role)

        return jsonify({
            'response': result['reply'],
            'message_routed': result['routed'],
            'recipient_name': result['recipient_name']
        })

    except InputError as e:
        body, status = error_response(e)
        return jsonify(body), status
    except Exception as e:
        log_error(f"Chat handler error: {str(e)}", exc_info=True)
        return jsonify({'error': str(e) or 'An unexpected error occurred.'}), 500
