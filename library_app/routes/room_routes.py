from flask import Blueprint, current_app, jsonify

from library_app.routes.guards import login_required

room_bp = Blueprint('rooms', __name__)


@room_bp.route('/', methods=['GET'], strict_slashes=False)
@login_required
def list_rooms():
    """Study rooms with their capacity and current status."""
    rooms = current_app.room_service.list_rooms()
    return jsonify([room.to_dict() for room in rooms])
