import logging

from flask import Flask, jsonify
from flask_cors import CORS

from config import Config
from database import init_db
from routes.student_exam_routes import student_exam
from utils.errors import register_error_handlers
from utils.json_provider import MongoJSONProvider


# =====================================================
# APP FACTORY
# =====================================================
def create_app(config_class=Config, mongo_client=None):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.json = MongoJSONProvider(app)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s : %(message)s",
    )

    CORS(app, origins=app.config["CORS_ORIGINS"])

    init_db(app, client=mongo_client)
    register_error_handlers(app)

    # =====================================================
    # BLUEPRINTS
    # =====================================================
    app.register_blueprint(student_exam, url_prefix="/student")

    # =====================================================
    # HEALTH CHECK
    # =====================================================
    @app.route("/health")
    def health():
        return jsonify({"status": "ok"})

    app.logger.info("Student exam API ready")
    return app


# =====================================================
# LOCAL RUN ONLY (PRODUCTION USES GUNICORN: "app:create_app()")
# =====================================================
if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000)
