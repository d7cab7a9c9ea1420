import os
from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException, NotFound

from flashdeck.infrastructure.config import settings
from flashdeck.infrastructure.database import init_app as init_db, ping_database
from fd_utils.logger_utils import logger

# Import Blueprints
from flashdeck.api.routes_collections import collections_bp
from flashdeck.api.routes_study import study_bp


def create_app():
    """Application factory for Flask."""
    app = Flask(__name__)

    # --- Core Configuration ---
    app.config.from_object(settings)
    app.json.ensure_ascii = False
    logger.setLevel(settings.LOG_LEVEL)

    # --- Security Configuration ---
    CORS(app, resources={r"/api/*": {"origins": settings.CORS_ORIGINS}})

    # --- Initialize Extensions ---
    init_db(app)

    # --- Blueprints Registration ---
    app.register_blueprint(collections_bp, url_prefix='/api/collections')
    app.register_blueprint(study_bp, url_prefix='/api/study')

    # --- Request Hooks ---
    @app.after_request
    def add_security_headers(response):
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'SAMEORIGIN'
        response.headers['X-XSS-Protection'] = '1; mode=block'
        return response

    # --- Health Checks ---
    @app.route('/health')
    def health_check():
        return jsonify({"status": "healthy"}), 200

    @app.route('/health/detailed')
    def detailed_health_check():
        health_status = {"status": "healthy", "components": {}}
        try:
            ping_database()
            health_status["components"]["mongodb"] = {"status": "healthy"}
        except Exception as e:
            health_status["components"]["mongodb"] = {"status": "unhealthy", "error": str(e)}
            health_status["status"] = "unhealthy"
        return jsonify(health_status), 503 if health_status["status"] == "unhealthy" else 200

    # --- Error Handling ---
    @app.errorhandler(NotFound)
    def handle_not_found(error):
        logger.warning(f"Not Found error for path: {request.path}")
        return jsonify({"error": "Not Found"}), 404

    @app.errorhandler(Exception)
    def handle_exception(error):
        if isinstance(error, HTTPException):
            return jsonify({"error": error.name}), error.code
        logger.error(f"Unhandled exception for path {request.path}: {error}", exc_info=True)
        return jsonify({"error": "Internal Server Error"}), 500

    logger.info(f"Flask App created successfully in {settings.FLASK_ENV} mode.")
    return app

if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', port=int(os.environ.get("PORT", 5000)), debug=settings.DEBUG)
