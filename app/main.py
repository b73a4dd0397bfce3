from flask import Flask, jsonify
from flask_cors import CORS
from app.config import CLIENT_ORIGIN, DEBUG, PORT
from app.db.psql.database import init_db
from app.exceptions import CityServiceError
from app.rout.city_routs import cities_blueprint
from app.utils.logger import get_logger

logger = get_logger(__name__)

app = Flask(__name__)
CORS(app, origins=CLIENT_ORIGIN)
app.register_blueprint(cities_blueprint, url_prefix='/cities')
init_db()


@app.errorhandler(CityServiceError)
def handle_city_service_error(error):
    return jsonify(error.to_dict()), error.status_code


@app.errorhandler(404)
def handle_not_found(error):
    return jsonify({"status": "error", "message": "Resource not found"}), 404


if __name__ == "__main__":
    logger.info(f"Starting cities server on port {PORT}")
    app.run(debug=DEBUG, port=PORT)
