"""
File: room_service.py
Purpose: Service Layer for Study Room listing and administration.
"""
import logging

from library_app.exceptions import InvalidRequest, NotFound
from library_app.models.daos.reservation_dao import ReservationDAO
from library_app.models.daos.room_dao import RoomDAO

logger = logging.getLogger(__name__)


class RoomService:
    def __init__(self, db_manager):
        self.db = db_manager
        self.room_dao = RoomDAO(db_manager)
        self.reservation_dao = ReservationDAO(db_manager)

    def list_rooms(self):
        return self.room_dao.get_all_rooms()

    def list_rooms_with_reservations(self):
        return self.room_dao.get_rooms_with_reservations()

    def room_reservations(self, room_id):
        return self.reservation_dao.get_room_reservations(room_id)

    def add_room(self, room_id, capacity):
        """New rooms start out Available."""
        self.room_dao.insert_room(room_id, capacity)
        logger.info("Room %s added (capacity %s)", room_id, capacity)

    def update_capacity(self, room_id, capacity):
        # MySQL reports changed rows only, so check for the room explicitly
        with self.db.transaction() as tx:
            rooms = RoomDAO(tx)
            if rooms.get_room(room_id) is None:
                raise NotFound("Room not found")
            rooms.update_capacity(room_id, capacity)
        logger.info("Room %s capacity set to %s", room_id, capacity)

    def delete_room(self, room_id):
        """Refuses to delete a room that still has reservations."""
        with self.db.transaction() as tx:
            if ReservationDAO(tx).has_reservations_for_room(room_id):
                raise InvalidRequest("Cannot delete room, existing reservations found.")
            if RoomDAO(tx).delete_room(room_id) == 0:
                raise NotFound("Room not found or already deleted.")
        logger.info("Room %s deleted", room_id)
