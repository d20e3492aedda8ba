import os
import logging
from flask import Flask
from mongoengine import connect
from dotenv import load_dotenv
from flask_cors import CORS
from routes.student_routes import bp
from utils.error_handlers import register_error_handlers
# Load environment variables
load_dotenv()


def create_app(config=None):
    app = Flask(__name__)

    # Flask config
    CORS(app, resources={r"/*": {"origins": "*"}})
    app.config["SECRET_KEY"] = os.getenv("SECRET_KEY", "fallback-secret")
    app.config["MONGO_URI"] = os.getenv("MONGO_URI")
    app.config["MONGO_DB"] = os.getenv("MONGO_DB", "students")
    app.config["MONGO_CONNECT"] = True
    app.config["LOG_LEVEL"] = os.getenv("LOG_LEVEL", "INFO")
    if config:
        app.config.update(config)
    app.json.sort_keys = False

    logging.basicConfig(
        level=str(app.config["LOG_LEVEL"]).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )

    # Connect to MongoDB
    if app.config["MONGO_CONNECT"]:
        connect(db=app.config["MONGO_DB"], host=app.config["MONGO_URI"])

    app.register_blueprint(bp)
    register_error_handlers(app)

    @app.route("/")
    def home():
        return {"message": "Students API is running"}

    return app

if __name__ == "__main__":
    app = create_app()
    app.run(debug=True, port=int(os.getenv("PORT", 8000)))
