from flask import Blueprint, request, jsonify
from routes.chat import get_service, get_json_body
from services.helpers.error_handlers import handle_service_error

connections_bp = Blueprint('connections', __name__)


def _services():
    return get_service('connections'), get_service('input_sanitizer')


@connections_bp.route('/connections/<profile_id>', methods=['GET'])
def list_connections(profile_id):
    """Approved connections and incoming requests for a profile"""
    service, sanitizer = _services()
    if service is None:
        return jsonify({'error': 'Connection service is not configured'}), 503

    try:
        return jsonify(service.list_connections(sanitizer.sanitize_id(profile_id)))
    except Exception as e:
        body, status = handle_service_error(e, 'listing connections')
        return jsonify(body), status


@connections_bp.route('/connections', methods=['POST'])
def request_connection():
    """Send a connection request"""
    service, sanitizer = _services()
    if service is None:
        return jsonify({'error': 'Connection service is not configured'}), 503

    try:
        data = get_json_body()
        connection = service.request_connection(
            sanitizer.sanitize_id(data.get('requester_id')),
            sanitizer.sanitize_id(data.get('requested_id'))
        )
        return jsonify(connection), 201
    except Exception as e:
        body, status = handle_service_error(e, 'requesting connection')
        return jsonify(body), status


@connections_bp.route('/connections/<connection_id>/respond', methods=['POST'])
def respond_to_request(connection_id):
    """Approve or reject an incoming request"""
    service, sanitizer = _services()
    if service is None:
        return jsonify({'error': 'Connection service is not configured'}), 503

    try:
        data = get_json_body()
        connection = service.respond_to_request(
            sanitizer.sanitize_id(connection_id),
            sanitizer.sanitize_id(data.get('profile_id')),
            (data.get('action') or '').strip().lower()
        )
        return jsonify(connection)
    except Exception as e:
        body, status = handle_service_error(e, 'responding to connection')
        return jsonify(body), status


@connections_bp.route('/profiles/search', methods=['GET'])
def search_profiles():
    """Find profiles by name"""
    service, sanitizer = _services()
    if service is None:
        return jsonify({'error': 'Connection service is not configured'}), 503

    try:
        term = sanitizer.sanitize_search_term(request.args.get('q', ''))
        exclude = sanitizer.sanitize_id(request.args.get('exclude')) or None
        return jsonify({'profiles': service.search_profiles(term, exclude)})
    except Exception as e:
        body, status = handle_service_error(e, 'searching profiles')
        return jsonify(body), status
