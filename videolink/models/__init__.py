from videolink.models.product import Product
from videolink.models.option import AttributeOption, Option
from videolink.models.audit_log import AuditLog

__all__ = ["Product", "AttributeOption", "Option", "AuditLog"]
