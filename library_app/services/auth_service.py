"""
File: auth_service.py
Purpose: Service Layer for Authentication (bearer identity) and the admin capability.
"""
import logging

from library_app.exceptions import Forbidden
from library_app.models.daos.customer_dao import CustomerDAO

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, db_manager, verifier):
        self.customer_dao = CustomerDAO(db_manager)
        self.verifier = verifier

    def authenticate(self, authorization_header):
        """Resolves an Authorization header to an Identity (raises Unauthenticated)."""
        return self.verifier.verify_header(authorization_header)

    def require_admin(self, identity):
        """Admins are customers whose ROLE is 'admin'."""
        customer = self.customer_dao.get_customer_by_email(identity.email)
        if customer is None or not customer.is_admin:
            logger.warning("Admin access denied for %s", identity.email)
            raise Forbidden("Access denied: Admins only")
        return customer
