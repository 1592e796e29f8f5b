from library_app.models.entities.reservation import Reservation


class ReservationDAO:
    """
    Data Access Object for Room Reservations.

    Works against either the DBManager or an open Transaction, so a service can
    group several statements into one unit of work.
    """

    COLUMNS = """
        RESERVATION_ID, TOPIC_DESCRIPTION, RESERVATION_DATE, START_TIME, END_TIME,
        GROUP_SIZE, ROOM_ID, CUSTOMER_ID, EVENT_ID
    """

    def __init__(self, db):
        self.db = db

    # =================================================================
    # Writes
    # =================================================================

    def insert_reservation(self, customer_id, room_id, topic, date, start_time, end_time,
                           group_size, event_id=None):
        """Inserts a reservation row and returns the store-assigned id."""
        query = """
            INSERT INTO NSH_RESERVATION
            (TOPIC_DESCRIPTION, RESERVATION_DATE, START_TIME, END_TIME, GROUP_SIZE, ROOM_ID, CUSTOMER_ID, EVENT_ID)
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
        """
        return self.db.insert(query, (topic, date, start_time, end_time, group_size, room_id, customer_id, event_id))

    def delete_reservation(self, reservation_id):
        query = "DELETE FROM NSH_RESERVATION WHERE RESERVATION_ID = %s"
        return self.db.execute_query(query, (reservation_id,))

    def delete_room_reservations(self, room_id):
        query = "DELETE FROM NSH_RESERVATION WHERE ROOM_ID = %s"
        return self.db.execute_query(query, (room_id,))

    # =================================================================
    # Reads
    # =================================================================

    def get_customer_reservations(self, customer_id):
        """Most recent reservation date first."""
        query = f"""
            SELECT {self.COLUMNS}
            FROM NSH_RESERVATION
            WHERE CUSTOMER_ID = %s
            ORDER BY RESERVATION_DATE DESC, START_TIME DESC, RESERVATION_ID DESC
        """
        return [Reservation.from_row(r) for r in self.db.fetch_all(query, (customer_id,))]

    def get_owned_room_id(self, reservation_id, customer_id):
        """
        Ownership check: the room of this reservation, only if it belongs to the customer.
        Returns None when no such reservation exists for this customer.
        """
        query = "SELECT ROOM_ID FROM NSH_RESERVATION WHERE RESERVATION_ID = %s AND CUSTOMER_ID = %s"
        row = self.db.fetch_one(query, (reservation_id, customer_id))
        return row['ROOM_ID'] if row else None

    def get_room_id(self, reservation_id):
        query = "SELECT ROOM_ID FROM NSH_RESERVATION WHERE RESERVATION_ID = %s"
        row = self.db.fetch_one(query, (reservation_id,))
        return row['ROOM_ID'] if row else None

    def count_upcoming_for_room(self, room_id, today):
        query = """
            SELECT COUNT(*) AS UPCOMING
            FROM NSH_RESERVATION
            WHERE ROOM_ID = %s AND RESERVATION_DATE >= %s
        """
        row = self.db.fetch_one(query, (room_id, today))
        return row['UPCOMING'] if row else 0

    def has_reservations_for_room(self, room_id):
        query = "SELECT 1 AS FOUND FROM NSH_RESERVATION WHERE ROOM_ID = %s LIMIT 1"
        return self.db.fetch_one(query, (room_id,)) is not None

    def get_room_reservations(self, room_id):
        query = """
            SELECT R.RESERVATION_ID, R.TOPIC_DESCRIPTION, R.RESERVATION_DATE,
                   R.START_TIME, R.END_TIME, R.GROUP_SIZE, C.FIRST_NAME, C.LAST_NAME
            FROM NSH_RESERVATION R
            JOIN NSH_CUSTOMER C ON R.CUSTOMER_ID = C.CUSTOMER_ID
            WHERE R.ROOM_ID = %s
            ORDER BY R.RESERVATION_DATE DESC, R.START_TIME DESC
        """
        return self.db.fetch_all(query, (room_id,))
