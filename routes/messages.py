from flask import Blueprint, jsonify
from routes.chat import get_service, get_json_body
from services.helpers.error_handlers import handle_service_error

messages_bp = Blueprint('messages', __name__)


@messages_bp.route('/messages/<profile_id>', methods=['GET'])
def list_messages(profile_id):
    """Forwarded messages sent or received by a profile"""
    service = get_service('messages')
    sanitizer = get_service('input_sanitizer')
    if service is None:
        return jsonify({'error': 'Message service is not configured'}), 503

    try:
        return jsonify({'messages': service.list_messages(sanitizer.sanitize_id(profile_id))})
    except Exception as e:
        body, status = handle_service_error(e, 'listing messages')
        return jsonify(body), status


@messages_bp.route('/messages/<profile_id>/unread', methods=['GET'])
def unread_count(profile_id):
    """Count of received messages not yet read"""
    service = get_service('messages')
    sanitizer = get_service('input_sanitizer')
    if service is None:
        return jsonify({'error': 'Message service is not configured'}), 503

    try:
        return jsonify({'unread': service.unread_count(sanitizer.sanitize_id(profile_id))})
    except Exception as e:
        body, status = handle_service_error(e, 'counting unread messages')
        return jsonify(body), status


@messages_bp.route('/messages/<message_id>/read', methods=['POST'])
def mark_read(message_id):
    """Mark a received message as read"""
    service = get_service('messages')
    sanitizer = get_service('input_sanitizer')
    if service is None:
        return jsonify({'error': 'Message service is not configured'}), 503

    try:
        data = get_json_body()
        message = service.mark_read(
            sanitizer.sanitize_id(message_id),
            sanitizer.sanitize_id(data.get('profile_id'))
        )
        return jsonify(message)
    except Exception as e:
        body, status = handle_service_error(e, 'marking message read')
        return jsonify(body), status
