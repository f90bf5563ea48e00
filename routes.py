# routes.py

from datetime import datetime

from flask import request, jsonify, current_app
from werkzeug.exceptions import BadRequest, HTTPException, RequestEntityTooLarge

from pin_parser import BlueprintParser, PinPropertyParser

# Stateless, shared across requests
pin_property_parser = PinPropertyParser()


def _read_text_payload():
    """Returns (text, node_name) from a JSON body or a plain-text body."""
    if request.is_json:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict) or not isinstance(payload.get('text'), str):
            raise BadRequest("JSON body must be an object with a 'text' string.")
        return payload['text'], str(payload.get('node_name') or '')
    text = request.get_data(as_text=True)
    if not text.strip():
        raise BadRequest("Request body is empty.")
    return text, request.args.get('node_name', '')


# ==============================================================================
# Main Function to Register Routes
# ==============================================================================
def register_routes(app):

    # ==============================================================================
    # Pin Decoding Route
    # ==============================================================================
    @app.route('/api/pins', methods=['POST'])
    def decode_pin():
        logger = current_app.logger
        text, node_name = _read_text_payload()
        logger.debug(f"Decoding pin attribute list (len: {len(text)}) for node '{node_name}'")
        pin = pin_property_parser.parse(text.strip(), node_name)
        return jsonify(pin.to_dict())

    # ==============================================================================
    # Node Decoding Route
    # ==============================================================================
    @app.route('/api/nodes', methods=['POST'])
    def decode_nodes():
        logger = current_app.logger
        text, _ = _read_text_payload()
        parser = BlueprintParser(pin_property_parser)
        nodes = parser.parse(text)
        logger.info(f"Decoded {len(nodes)} nodes, {parser.stats['total_pins']} pins.")
        return jsonify({
            "stats": parser.stats,
            "nodes": [node.to_dict() for node in nodes],
        })

    # ==============================================================================
    # Health Check Route
    # ==============================================================================
    @app.route('/health')
    def health_check():
        return jsonify({"status": "ok", "timestamp": datetime.now().isoformat()}), 200

    # ==============================================================================
    # Error Handlers
    # ==============================================================================
    @app.errorhandler(BadRequest)
    def handle_bad_request(e):
        current_app.logger.warning(f"400 Bad Request: {request.path}: {e.description}")
        return jsonify(status='error', message=e.description), 400

    @app.errorhandler(404)
    def page_not_found(e):
        current_app.logger.warning(f"404 Not Found: {request.path}")
        return jsonify(error='Not Found', message='The requested URL was not found on the server.'), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify(error='Method Not Allowed', message=str(e.description)), 405

    @app.errorhandler(RequestEntityTooLarge)
    def handle_request_entity_too_large(e):
        logger = current_app.logger
        logger.warning(f"413 Request Entity Too Large: {request.path}")
        max_size = current_app.config.get('MAX_CONTENT_LENGTH')
        max_size_kb = max_size // 1024 if max_size else 'Unknown'
        return jsonify(status='error', message=f"The submitted data is too large. Maximum size: {max_size_kb} KB."), 413

    @app.errorhandler(Exception)
    def handle_exception(e):
        if isinstance(e, HTTPException):
            return e
        current_app.logger.error(f"Unhandled Exception caught by generic handler: {request.path}", exc_info=True)
        return jsonify(status='error', message='An unexpected server error occurred.'), 500

# --- END register_routes ---
