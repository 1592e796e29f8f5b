ADMIN_ROLE = 'admin'


class Customer:
    """
    Data Transfer Object for Customer Entity.
    """
    def __init__(self, customer_id, email, first_name=None, last_name=None, role=None):
        self.customer_id = customer_id          # CUSTOMER_ID (PK)
        self.email = email                      # EMAIL_ADDRESS (unique)
        self.first_name = first_name
        self.last_name = last_name
        self.role = role

    @property
    def is_admin(self):
        return (self.role or '').lower() == ADMIN_ROLE

    @staticmethod
    def from_row(row):
        return Customer(
            customer_id=row['CUSTOMER_ID'],
            email=row['EMAIL_ADDRESS'],
            first_name=row.get('FIRST_NAME'),
            last_name=row.get('LAST_NAME'),
            role=row.get('ROLE')
        )
