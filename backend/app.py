from flask import Flask
from flask_cors import CORS
import os

from core.config import get_cors_origins, is_development, load_environment

# Load environment variables BEFORE importing routes
for env_path in load_environment():
    print(f"Loaded environment from {env_path}")

from api.routes import api
from core.logger import logger

app = Flask(__name__)

# CORS configuration - require explicit origins (no wildcard default)
if not os.getenv('CORS_ORIGINS') and is_development():
    logger.warning("Using default CORS origins for development. Set CORS_ORIGINS in production!")
CORS(app, origins=get_cors_origins())

# Register blueprints
app.register_blueprint(api, url_prefix='/api')

@app.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint"""
    return {'status': 'ok', 'message': 'Backend is running'}, 200

@app.route('/', methods=['GET'])
def root():
    """Root endpoint"""
    return {'status': 'ok', 'message': 'Lead Forms API'}, 200

if __name__ == '__main__':
    port = int(os.getenv('PORT', 5000))
    debug = os.getenv('FLASK_DEBUG', 'False').lower() == 'true'
    app.run(host='0.0.0.0', port=port, debug=debug)
