from flask import jsonify
from datetime import datetime
from utils.logger import log_error, log_info


def setup_routes(app):
    """Setup application routes"""

    @app.route('/')
    def home():
        """Home page"""
        return jsonify({
            "status": "active",
            "service": app.config.get('SERVICE_NAME', 'Stellar Link'),
            "version": "1.0",
            "timestamp": datetime.now().isoformat()
        })

    @app.route('/health')
    def health_check():
        """Health check endpoint"""
        supabase = app.config.get('supabase')
        if supabase is None:
            db_status = "not_configured"
        else:
            try:
                supabase.table('profiles').select('id').limit(1).execute()
                db_status = "connected"
            except Exception as e:
                log_error(f"Health check query failed: {str(e)}")
                db_status = "error"

        return jsonify({
            "status": "healthy" if db_status == "connected" else "degraded",
            "database": db_status,
            "timestamp": datetime.now().isoformat()
        })

    @app.errorhandler(404)
    def not_found(e):
        """Handle 404 errors"""
        return jsonify({'error': 'Endpoint not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        """Handle 405 errors"""
        return jsonify({'error': 'Method not allowed'}), 405

    @app.errorhandler(500)
    def server_error(e):
        """Handle 500 errors"""
        log_error(f"Server error: {str(e)}")
        return jsonify({'error': 'Internal server error'}), 500

    log_info("Routes setup complete")
