from enum import Enum

class PaymentStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    OVERDUE = "overdue"
