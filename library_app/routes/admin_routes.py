from flask import Blueprint, current_app, jsonify, request

from library_app.routes.guards import admin_required
from library_app.routes.reservation_routes import parse_reservation_body
from library_app.utils import validators as v
from library_app.utils.serializers import row_to_json

admin_bp = Blueprint('admin', __name__)


# --- Rooms ---
@admin_bp.route('/rooms', methods=['GET'])
@admin_required
def rooms_overview():
    """All study rooms along with their reservations."""
    rows = current_app.room_service.list_rooms_with_reservations()
    return jsonify([row_to_json(r) for r in rows])


@admin_bp.route('/rooms/<int:room_id>/reservations', methods=['GET'])
@admin_required
def room_reservations(room_id):
    rows = current_app.room_service.room_reservations(room_id)
    return jsonify([row_to_json(r) for r in rows])


@admin_bp.route('/rooms', methods=['POST'])
@admin_required
def add_room():
    data = v.json_body(request)
    room_id = v.positive_int(v.field(data, 'roomId', 'room_id'), 'roomId')
    capacity = v.positive_int(v.field(data, 'capacity'), 'capacity')
    current_app.room_service.add_room(room_id, capacity)
    return jsonify({'message': 'Room added successfully'}), 201


@admin_bp.route('/rooms/<int:room_id>', methods=['PUT'])
@admin_required
def edit_room(room_id):
    data = v.json_body(request)
    capacity = v.positive_int(v.field(data, 'capacity'), 'capacity')
    current_app.room_service.update_capacity(room_id, capacity)
    return jsonify({'message': 'Room updated successfully'})


@admin_bp.route('/rooms/<int:room_id>', methods=['DELETE'])
@admin_required
def delete_room(room_id):
    current_app.room_service.delete_room(room_id)
    return jsonify({'message': 'Room deleted successfully.'})


@admin_bp.route('/rooms/<int:room_id>/reservations', methods=['DELETE'])
@admin_required
def clear_room_reservations(room_id):
    deleted = current_app.reservation_service.clear_room(room_id)
    return jsonify({'message': 'All reservations deleted for this room.', 'deleted': deleted})


# --- Reservations ---
@admin_bp.route('/reservations', methods=['POST'])
@admin_required
def create_reservation_for_customer():
    """Create a reservation for a customer, optionally linked to an event."""
    data = v.json_body(request)
    customer_id = v.positive_int(v.field(data, 'customerId', 'customer_id'), 'customerId')
    fields = parse_reservation_body(data)
    reservation = current_app.reservation_service.create_for_customer(customer_id, **fields)
    return jsonify({
        'message': 'Reservation created and linked to event!',
        'reservation_id': reservation.reservation_id
    }), 201
