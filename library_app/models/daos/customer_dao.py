from library_app.models.entities.customer import Customer


class CustomerDAO:
    """
    Data Access Object for Customer lookups.
    Customers are keyed by the verified email address from the identity provider.
    """
    def __init__(self, db):
        self.db = db

    def get_customer_by_email(self, email):
        query = """
            SELECT CUSTOMER_ID, EMAIL_ADDRESS, FIRST_NAME, LAST_NAME, ROLE
            FROM NSH_CUSTOMER
            WHERE EMAIL_ADDRESS = %s
        """
        row = self.db.fetch_one(query, (email,))
        return Customer.from_row(row) if row else None

    def get_customer_by_id(self, customer_id):
        query = """
            SELECT CUSTOMER_ID, EMAIL_ADDRESS, FIRST_NAME, LAST_NAME, ROLE
            FROM NSH_CUSTOMER
            WHERE CUSTOMER_ID = %s
        """
        row = self.db.fetch_one(query, (customer_id,))
        return Customer.from_row(row) if row else None
