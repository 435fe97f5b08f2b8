from pydantic import Field

from telegate.telegram.types.base import TelegramObject
from telegate.telegram.types.user import User


class LabeledPrice(TelegramObject):
    label: str
    amount: int


class Invoice(TelegramObject):
    title: str
    description: str
    start_parameter: str
    currency: str
    total_amount: int


class ShippingAddress(TelegramObject):
    country_code: str
    state: str
    city: str
    street_line1: str
    street_line2: str
    post_code: str


class OrderInfo(TelegramObject):
    name: str | None = None
    phone_number: str | None = None
    email: str | None = None
    shipping_address: ShippingAddress | None = None


class ShippingOption(TelegramObject):
    id: str
    title: str
    prices: list[LabeledPrice]


class SuccessfulPayment(TelegramObject):
    currency: str
    total_amount: int
    invoice_payload: str
    telegram_payment_charge_id: str
    provider_payment_charge_id: str
    subscription_expiration_date: int | None = None
    is_recurring: bool | None = None
    is_first_recurring: bool | None = None
    shipping_option_id: str | None = None
    order_info: OrderInfo | None = None


class RefundedPayment(TelegramObject):
    currency: str
    total_amount: int
    invoice_payload: str
    telegram_payment_charge_id: str
    provider_payment_charge_id: str | None = None


class ShippingQuery(TelegramObject):
    id: str
    from_user: User = Field(alias="from")
    invoice_payload: str
    shipping_address: ShippingAddress


class PreCheckoutQuery(TelegramObject):
    id: str
    from_user: User = Field(alias="from")
    currency: str
    total_amount: int
    invoice_payload: str
    shipping_option_id: str | None = None
    order_info: OrderInfo | None = None


class StarTransaction(TelegramObject):
    """A Telegram Star transaction; partner details are kept as raw extras."""

    id: str
    amount: int
    date: int
    nanostar_amount: int | None = None
    source: dict | None = None
    receiver: dict | None = None


class StarTransactions(TelegramObject):
    transactions: list[StarTransaction]
