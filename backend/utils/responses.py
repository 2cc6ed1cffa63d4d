# backend/utils/responses.py
from flask import jsonify


def api_response(message, data, status=200):
    return jsonify({"status": status, "message": message, "data": data}), status
