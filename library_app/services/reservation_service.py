"""
File: reservation_service.py
Purpose: Service Layer for Study Room Reservations (create, list, cancel) and room occupancy.
"""
import logging
from datetime import date

from library_app.exceptions import Forbidden, NotFound, StoreFailure
from library_app.models.daos.customer_dao import CustomerDAO
from library_app.models.daos.reservation_dao import ReservationDAO
from library_app.models.daos.room_dao import RoomDAO
from library_app.models.entities.reservation import Reservation
from library_app.models.entities.room import ROOM_AVAILABLE, ROOM_OCCUPIED

logger = logging.getLogger(__name__)


class ReservationService:
    """
    Orchestrates reservation writes and keeps each room's status in line with them.

    A room is Occupied while at least one reservation dated today or later
    references it. Every write runs in one transaction together with the
    status update it implies, so a failure leaves neither behind.
    """

    def __init__(self, db_manager, clock=date.today):
        self.db = db_manager
        self.clock = clock

    def _resolve_customer(self, tx, identity):
        customer = CustomerDAO(tx).get_customer_by_email(identity.email)
        if customer is None:
            logger.warning("Customer not found for %s", identity.email)
            raise NotFound("Customer not found")
        return customer

    def _refresh_room_status(self, tx, room_id):
        """Re-scans upcoming reservations of a room and stores the derived status."""
        upcoming = ReservationDAO(tx).count_upcoming_for_room(room_id, self.clock().isoformat())
        status = ROOM_OCCUPIED if upcoming else ROOM_AVAILABLE
        RoomDAO(tx).set_status(room_id, status)
        return status

    def _book(self, tx, customer_id, room_id, topic, reservation_date, start_time, end_time,
              group_size, event_id):
        if RoomDAO(tx).get_room(room_id) is None:
            raise NotFound("Room not found")

        reservation_id = ReservationDAO(tx).insert_reservation(
            customer_id=customer_id,
            room_id=room_id,
            topic=topic,
            date=reservation_date,
            start_time=start_time,
            end_time=end_time,
            group_size=group_size,
            event_id=event_id
        )
        RoomDAO(tx).set_status(room_id, ROOM_OCCUPIED)
        return Reservation(reservation_id, room_id, customer_id, reservation_date, start_time,
                           end_time, group_size, topic=topic, event_id=event_id)

    # --- Customer Operations ---
    def create(self, identity, room_id, topic, date, start_time, end_time, group_size, event_id=None):
        """Books a room for the calling customer and marks the room Occupied."""
        with self.db.transaction() as tx:
            customer = self._resolve_customer(tx, identity)
            reservation = self._book(tx, customer.customer_id, room_id, topic, date,
                                     start_time, end_time, group_size, event_id)
        logger.info("Reservation %s created for room %s by customer %s",
                    reservation.reservation_id, room_id, customer.customer_id)
        return reservation

    def list_mine(self, identity):
        """Reservations owned by the caller, most recent date first."""
        with self.db.transaction() as tx:
            customer = self._resolve_customer(tx, identity)
            return ReservationDAO(tx).get_customer_reservations(customer.customer_id)

    def cancel(self, identity, reservation_id):
        """
        Cancels one of the caller's reservations.

        Raises Forbidden when no reservation with this id belongs to the caller,
        whether it belongs to someone else or does not exist at all.
        """
        with self.db.transaction() as tx:
            customer = self._resolve_customer(tx, identity)
            room_id = ReservationDAO(tx).get_owned_room_id(reservation_id, customer.customer_id)
            if room_id is None:
                logger.warning("Customer %s may not cancel reservation %s",
                               customer.customer_id, reservation_id)
                raise Forbidden("Not allowed to cancel this reservation")

            status = self._delete_and_refresh(tx, reservation_id, room_id)
        logger.info("Reservation %s cancelled by customer %s (room %s now %s)",
                    reservation_id, customer.customer_id, room_id, status)
        return status

    # --- Admin Operations ---
    def cancel_as_admin(self, reservation_id):
        """Cancels any reservation, without an ownership check."""
        with self.db.transaction() as tx:
            room_id = ReservationDAO(tx).get_room_id(reservation_id)
            if room_id is None:
                raise NotFound("Reservation not found")

            status = self._delete_and_refresh(tx, reservation_id, room_id)
        logger.info("Reservation %s cancelled by admin (room %s now %s)", reservation_id, room_id, status)
        return status

    def create_for_customer(self, customer_id, room_id, topic, date, start_time, end_time,
                            group_size, event_id=None):
        """Books a room on behalf of a customer, optionally linked to an event."""
        with self.db.transaction() as tx:
            if CustomerDAO(tx).get_customer_by_id(customer_id) is None:
                raise NotFound("Customer not found")
            reservation = self._book(tx, customer_id, room_id, topic, date,
                                     start_time, end_time, group_size, event_id)
        logger.info("Reservation %s created by admin for customer %s (event %s)",
                    reservation.reservation_id, customer_id, event_id)
        return reservation

    def clear_room(self, room_id):
        """Removes every reservation of a room; returns how many were deleted."""
        with self.db.transaction() as tx:
            if RoomDAO(tx).get_room(room_id) is None:
                raise NotFound("Room not found")
            deleted = ReservationDAO(tx).delete_room_reservations(room_id)
            self._refresh_room_status(tx, room_id)
        logger.info("Deleted %d reservations of room %s", deleted, room_id)
        return deleted

    def _delete_and_refresh(self, tx, reservation_id, room_id):
        if ReservationDAO(tx).delete_reservation(reservation_id) == 0:
            # the row was seen a moment ago in this same transaction
            logger.error("Reservation %s vanished before it could be deleted", reservation_id)
            raise StoreFailure("Failed to cancel reservation")
        return self._refresh_room_status(tx, room_id)
