from library_app.models.entities.room import Room, ROOM_AVAILABLE


class RoomDAO:
    """
    Data Access Object for Study Rooms.

    Besides plain CRUD this holds the reporting queries used by the admin
    dashboard (rooms joined with their reservations and reserving customers).
    """

    def __init__(self, db):
        self.db = db

    def get_room(self, room_id):
        query = "SELECT ROOM_ID, CAPACITY, ROOM_STATUS FROM NSH_ROOM WHERE ROOM_ID = %s"
        row = self.db.fetch_one(query, (room_id,))
        return Room.from_row(row) if row else None

    def get_all_rooms(self):
        query = "SELECT ROOM_ID, CAPACITY, ROOM_STATUS FROM NSH_ROOM ORDER BY ROOM_ID"
        return [Room.from_row(r) for r in self.db.fetch_all(query)]

    def get_rooms_with_reservations(self):
        """One row per (room, reservation); rooms without reservations appear once with NULLs."""
        query = """
            SELECT
                r.ROOM_ID, r.CAPACITY, r.ROOM_STATUS,
                res.RESERVATION_ID, res.TOPIC_DESCRIPTION, res.RESERVATION_DATE,
                res.START_TIME, res.END_TIME, res.GROUP_SIZE,
                c.FIRST_NAME, c.LAST_NAME
            FROM NSH_ROOM r
            LEFT JOIN NSH_RESERVATION res ON r.ROOM_ID = res.ROOM_ID
            LEFT JOIN NSH_CUSTOMER c ON res.CUSTOMER_ID = c.CUSTOMER_ID
            ORDER BY r.ROOM_ID ASC, res.RESERVATION_DATE DESC
        """
        return self.db.fetch_all(query)

    def insert_room(self, room_id, capacity):
        query = "INSERT INTO NSH_ROOM (ROOM_ID, CAPACITY, ROOM_STATUS) VALUES (%s, %s, %s)"
        self.db.insert(query, (room_id, capacity, ROOM_AVAILABLE))

    def update_capacity(self, room_id, capacity):
        query = "UPDATE NSH_ROOM SET CAPACITY = %s WHERE ROOM_ID = %s"
        return self.db.execute_query(query, (capacity, room_id))

    def set_status(self, room_id, status):
        query = "UPDATE NSH_ROOM SET ROOM_STATUS = %s WHERE ROOM_ID = %s"
        return self.db.execute_query(query, (status, room_id))

    def delete_room(self, room_id):
        return self.db.execute_query("DELETE FROM NSH_ROOM WHERE ROOM_ID = %s", (room_id,))
