"""Audit trail of generated order IDs."""

from swiftwash.services.audit.audit_service import OrderIdAuditService, address_location
from swiftwash.services.audit.exceptions import OrderIdNotFound

__all__ = ["OrderIdAuditService", "OrderIdNotFound", "address_location"]
