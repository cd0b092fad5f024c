from .user_model import User
from .property_model import Property, Unit
from .tenant_model import Tenant
from .lease_model import Lease
from .payment_model import Payment
from .image_model import PropertyImage

__all__ = ["User", "Property", "Unit", "Tenant", "Lease", "Payment", "PropertyImage"]
