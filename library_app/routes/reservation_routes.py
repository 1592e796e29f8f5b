from flask import Blueprint, current_app, g, jsonify, request

from library_app.routes.guards import admin_required, login_required
from library_app.utils import validators as v

reservation_bp = Blueprint('reservations', __name__)


def parse_reservation_body(data):
    """Shared body parsing for customer and admin reservation creation."""
    start_time = v.clock_time(v.field(data, 'startTime', 'start_time'), 'startTime')
    end_time = v.clock_time(v.field(data, 'endTime', 'end_time'), 'endTime')
    v.time_window(start_time, end_time)
    return {
        'room_id': v.positive_int(v.field(data, 'roomId', 'room_id'), 'roomId'),
        'topic': v.field(data, 'topicDescription', 'topic_description', 'topic', required=False),
        'date': v.iso_date(v.field(data, 'date', 'reservationDate', 'reservation_date'), 'date'),
        'start_time': start_time,
        'end_time': end_time,
        'group_size': v.positive_int(v.field(data, 'groupSize', 'group_size'), 'groupSize'),
        'event_id': v.optional_int(v.field(data, 'eventId', 'event_id', required=False), 'eventId'),
    }


@reservation_bp.route('/create', methods=['POST'])
@login_required
def create_reservation():
    """Reserve a study room for the signed-in customer."""
    fields = parse_reservation_body(v.json_body(request))
    reservation = current_app.reservation_service.create(g.identity, **fields)
    return jsonify({
        'message': 'Room reserved successfully!',
        'reservation_id': reservation.reservation_id
    }), 201


@reservation_bp.route('/my', methods=['GET'])
@login_required
def my_reservations():
    reservations = current_app.reservation_service.list_mine(g.identity)
    return jsonify({'reservations': [r.to_dict() for r in reservations]}), 200


@reservation_bp.route('/admin/<int:reservation_id>', methods=['DELETE'])
@admin_required
def admin_cancel_reservation(reservation_id):
    current_app.reservation_service.cancel_as_admin(reservation_id)
    return jsonify({'message': 'Reservation cancelled successfully'}), 200


@reservation_bp.route('/<int:reservation_id>', methods=['DELETE'])
@login_required
def cancel_reservation(reservation_id):
    current_app.reservation_service.cancel(g.identity, reservation_id)
    return jsonify({'message': 'Reservation cancelled successfully'}), 200
