# routes/welcome.py
from flask import Response, jsonify


def show():
    return jsonify({'message': 'Hello world'})


def healthcheck():
    return Response('OK', status=200)
