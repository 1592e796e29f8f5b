"""
File: application.py
Purpose: Builds the Flask application and wires the store, identity verifier and services.
"""
import logging
from datetime import date

from flask import Flask, jsonify
from flask_cors import CORS

from database.db_manager import DBManager
from library_app.config import Settings
from library_app.exceptions import register_error_handlers
from library_app.routes.admin_routes import admin_bp
from library_app.routes.reservation_routes import reservation_bp
from library_app.routes.room_routes import room_bp
from library_app.services.auth_service import AuthService
from library_app.services.identity_service import TokenVerifier
from library_app.services.reservation_service import ReservationService
from library_app.services.room_service import RoomService


def configure_logging(level):
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )


def create_app(settings=None, db=None, verifier=None, clock=date.today):
    """
    The store and verifier can be passed in (tests use a SQLite store and a
    test signing key); otherwise both are built from settings.
    """
    settings = settings or Settings()
    configure_logging(settings.log_level)

    app = Flask(__name__)
    app.json.sort_keys = False
    CORS(app, origins=settings.cors_origins)

    db = db or DBManager(settings)
    verifier = verifier or TokenVerifier.from_settings(settings)

    # Services are attached to the app so blueprints reach them through current_app
    app.settings = settings
    app.db = db
    app.auth_service = AuthService(db, verifier)
    app.reservation_service = ReservationService(db, clock=clock)
    app.room_service = RoomService(db)

    app.register_blueprint(reservation_bp, url_prefix='/api/reservations')
    app.register_blueprint(room_bp, url_prefix='/api/rooms')
    app.register_blueprint(admin_bp, url_prefix='/api/admin')
    register_error_handlers(app)

    @app.route('/api', methods=['GET'])
    def api_root():
        return jsonify({'message': 'Library Management System API is running'})

    return app
