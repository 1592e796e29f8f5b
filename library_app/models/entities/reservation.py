from library_app.utils.serializers import to_json_value


class Reservation:
    """
    Data Transfer Object for Reservation Entity.
    """
    def __init__(self, reservation_id, room_id, customer_id, date, start_time, end_time,
                 group_size, topic=None, event_id=None):
        self.reservation_id = reservation_id
        self.room_id = room_id
        self.customer_id = customer_id
        self.date = date
        self.start_time = start_time
        self.end_time = end_time
        self.group_size = group_size
        self.topic = topic
        self.event_id = event_id

    @staticmethod
    def from_row(row):
        return Reservation(
            reservation_id=row['RESERVATION_ID'],
            room_id=row['ROOM_ID'],
            customer_id=row.get('CUSTOMER_ID'),
            date=row['RESERVATION_DATE'],
            start_time=row['START_TIME'],
            end_time=row['END_TIME'],
            group_size=row['GROUP_SIZE'],
            topic=row.get('TOPIC_DESCRIPTION'),
            event_id=row.get('EVENT_ID')
        )

    def to_dict(self):
        return {
            'reservation_id': self.reservation_id,
            'room_id': self.room_id,
            'topic_description': self.topic,
            'reservation_date': to_json_value(self.date),
            'start_time': to_json_value(self.start_time),
            'end_time': to_json_value(self.end_time),
            'group_size': self.group_size,
            'event_id': self.event_id
        }
