from flask import Blueprint, jsonify

API_VERSION = "1.0.0"


def create_default_bp(url_prefix="/api"):
    default_bp = Blueprint("default", __name__)

    @default_bp.route("/", methods=["GET"])
    def index():
        """後端初始狀態檢查"""
        return jsonify({
            "status": "ok",
            "message": "Restaurant API is running",
            "version": API_VERSION
        })

    @default_bp.route(f"{url_prefix.rstrip('/')}/test", methods=["POST"])
    def echo_test():
        """Test endpoint with a body
        The body is accepted but never inspected.
        ---
        tags:
          - test
        parameters:
          - in: body
            name: body
            required: true
            schema:
              type: object
              properties:
                foo:
                  type: string
                  example: bar
                number:
                  type: integer
                  example: 42
        responses:
          200:
            description: OK
            schema:
              type: object
              properties:
                result:
                  type: string
                  example: success
        """
        return jsonify({"result": "success"}), 200

    return default_bp
