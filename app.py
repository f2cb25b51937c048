import os
import sys
import logging
from flask import Flask, jsonify
from flask_cors import CORS
from flasgger import Swagger

from extensions import db
from utils import safe_getenv, load_db_url, save_log_to_db
from default_index import API_VERSION, create_default_bp
from restaurant import RestaurantRepository, create_restaurant_bp
from restaurant.serializers import RESTAURANT_DEFINITIONS

logger = logging.getLogger(__name__)

def create_app(config=None):
    app = Flask(__name__)
    CORS(app)

    app.config['SQLALCHEMY_DATABASE_URI'] = load_db_url()
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['JSON_AS_ASCII'] = False
    app.config['API_PREFIX'] = safe_getenv('API_PREFIX', '/api')
    app.config['SWAGGER'] = {'title': 'Restaurant API', 'uiversion': 3}
    if config:
        app.config.update(config)
    app.json.ensure_ascii = app.config['JSON_AS_ASCII']

    db.init_app(app)

    # 註冊 Blueprints
    api_prefix = app.config['API_PREFIX']
    app.register_blueprint(create_default_bp(api_prefix))
    app.register_blueprint(create_restaurant_bp(RestaurantRepository(db.session), url_prefix=api_prefix))

    # API 文件: /apidocs/ 與 /apispec_1.json
    Swagger(app, template={
        'info': {'title': 'Restaurant API', 'version': API_VERSION},
        'definitions': RESTAURANT_DEFINITIONS,
    })

    @app.route("/health")
    def health_check():
        return "OK", 200

    @app.errorhandler(500)
    def internal_error(error):
        original = getattr(error, "original_exception", None) or error
        logger.error("Unhandled error: %r", original, exc_info=original)
        db.session.rollback()
        save_log_to_db(f"Unhandled error: {original!r}")
        return jsonify({"error": "Internal server error"}), 500

    with app.app_context():
        db.create_all()

    return app

if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    app = create_app()
    port = int(os.environ.get("PORT", 10000))
    logger.info("Starting Flask development server on http://127.0.0.1:%s...", port)
    app.run(host='0.0.0.0', port=port)
