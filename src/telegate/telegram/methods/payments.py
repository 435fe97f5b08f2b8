"""Invoices, checkout answers and Telegram Stars."""

from typing import Any, ClassVar

from telegate.telegram.methods.base import ChatId, TelegramMethod
from telegate.telegram.types.formatting import ReplyParameters
from telegate.telegram.types.markup import InlineKeyboardMarkup
from telegate.telegram.types.message import Message
from telegate.telegram.types.payments import LabeledPrice, ShippingOption, StarTransactions


class _InvoiceFields(TelegramMethod):
    title: str
    description: str
    payload: str
    currency: str
    prices: list[LabeledPrice]
    provider_token: str | None = None
    max_tip_amount: int | None = None
    suggested_tip_amounts: list[int] | None = None
    provider_data: str | None = None
    photo_url: str | None = None
    photo_size: int | None = None
    photo_width: int | None = None
    photo_height: int | None = None
    need_name: bool | None = None
    need_phone_number: bool | None = None
    need_email: bool | None = None
    need_shipping_address: bool | None = None
    send_phone_number_to_provider: bool | None = None
    send_email_to_provider: bool | None = None
    is_flexible: bool | None = None


class SendInvoice(_InvoiceFields):
    api_method: ClassVar[str] = "sendInvoice"
    returning: ClassVar[Any] = Message

    chat_id: ChatId
    message_thread_id: int | None = None
    start_parameter: str | None = None
    disable_notification: bool | None = None
    protect_content: bool | None = None
    message_effect_id: str | None = None
    reply_parameters: ReplyParameters | None = None
    reply_markup: InlineKeyboardMarkup | None = None


class CreateInvoiceLink(_InvoiceFields):
    api_method: ClassVar[str] = "createInvoiceLink"
    returning: ClassVar[Any] = str

    subscription_period: int | None = None


class AnswerShippingQuery(TelegramMethod):
    api_method: ClassVar[str] = "answerShippingQuery"
    returning: ClassVar[Any] = bool

    shipping_query_id: str
    ok: bool
    shipping_options: list[ShippingOption] | None = None
    error_message: str | None = None


class AnswerPreCheckoutQuery(TelegramMethod):
    api_method: ClassVar[str] = "answerPreCheckoutQuery"
    returning: ClassVar[Any] = bool

    pre_checkout_query_id: str
    ok: bool
    error_message: str | None = None


class GetStarTransactions(TelegramMethod):
    api_method: ClassVar[str] = "getStarTransactions"
    returning: ClassVar[Any] = StarTransactions

    offset: int | None = None
    limit: int | None = None


class RefundStarPayment(TelegramMethod):
    api_method: ClassVar[str] = "refundStarPayment"
    returning: ClassVar[Any] = bool

    user_id: int
    telegram_payment_charge_id: str
