"""Data objects of the bot API for keyboards, queries, payments and webhooks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tgbot.basic_types import User


@dataclass
class GenericReply:
    """Base of every keyboard-related reply markup."""


@dataclass
class InlineKeyboardMarkup(GenericReply):
    """An inline keyboard shown right next to the message it belongs to."""

    inline_keyboard: list[list[Any]] = field(default_factory=list)


@dataclass
class ReplyKeyboardMarkup(GenericReply):
    """A custom keyboard with reply options."""

    keyboard: list[list[Any]] = field(default_factory=list)
    resize_keyboard: bool = False
    one_time_keyboard: bool = False
    selective: bool = False


@dataclass
class CallbackQuery:
    """An incoming callback query from a button of an inline keyboard."""

    id: str = ""
    from_user: User | None = None
    message: Any = None
    inline_message_id: str = ""
    chat_instance: str = ""
    data: str = ""
    game_short_name: str = ""


@dataclass
class ChatPermissions:
    """Actions a non-administrator user may take in a chat."""

    can_send_messages: bool = False
    can_send_media_messages: bool = False
    can_send_polls: bool = False
    can_send_other_messages: bool = False
    can_add_web_page_previews: bool = False
    can_change_info: bool = False
    can_invite_users: bool = False
    can_pin_messages: bool = False


@dataclass
class GameHighScore:
    """One row of the high score table of a game."""

    position: str = ""
    user: User | None = None
    score: int = 0


@dataclass
class Invoice:
    """Basic information about an invoice.

    ``total_amount`` is in the smallest units of ``currency``.
    """

    title: str = ""
    description: str = ""
    start_parameter: str = ""
    currency: str = ""
    total_amount: int = 0


@dataclass
class ShippingAddress:
    """A shipping address."""

    country_code: str = ""
    state: str = ""
    city: str = ""
    street_line1: str = ""
    street_line2: str = ""
    post_code: str = ""


@dataclass
class OrderInfo:
    """Information about an order."""

    name: str = ""
    phone_number: str = ""
    email: str = ""
    shipping_address: ShippingAddress | None = None


@dataclass
class ResponseParameters:
    """Why a request was unsuccessful."""

    migrate_to_chat_id: int = 0
    retry_after: int = 0


@dataclass
class ShippingQuery:
    """An incoming shipping query."""

    id: str = ""
    from_user: User | None = None
    invoice_payload: str = ""
    shipping_address: ShippingAddress | None = None


@dataclass
class WebhookInfo:
    """The current status of a webhook."""

    url: str = ""
    has_custom_certificate: bool = False
    pending_update_count: int = 0
    last_error_date: int = 0
    last_error_message: str = ""
    max_connections: int = 0
    allowed_updates: list[str] = field(default_factory=list)