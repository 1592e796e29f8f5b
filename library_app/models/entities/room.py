ROOM_AVAILABLE = 'Available'
ROOM_OCCUPIED = 'Occupied'


class Room:
    """
    Data Transfer Object for Room Entity.
    The status is derived from reservations and never edited directly.
    """
    def __init__(self, room_id, capacity, status=ROOM_AVAILABLE):
        self.room_id = room_id
        self.capacity = capacity
        self.status = status

    @staticmethod
    def from_row(row):
        return Room(row['ROOM_ID'], row['CAPACITY'], row.get('ROOM_STATUS', ROOM_AVAILABLE))

    def to_dict(self):
        return {
            'room_id': self.room_id,
            'capacity': self.capacity,
            'status': self.status
        }
