from enum import Enum


class PaymentMethod(str, Enum):
    GCASH = "gcash"
    PAYMAYA = "paymaya"
    BANK_TRANSFER = "bank_transfer"
    CASH = "cash"
