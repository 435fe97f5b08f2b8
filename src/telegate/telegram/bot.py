"""Typed, awaitable surface over every Bot API method."""

from __future__ import annotations

from typing import Any

from telegate.telegram import methods
from telegate.telegram.client import TelegramApiClient
from telegate.telegram.methods.base import TelegramMethod
from telegate.telegram.serialization import serialize_params
from telegate.telegram.types import (
    BotCommand,
    BotDescription,
    BotName,
    BotShortDescription,
    BusinessConnection,
    ChatAdministratorRights,
    ChatFullInfo,
    ChatInviteLink,
    ChatMember,
    File,
    ForumTopic,
    GameHighScore,
    MenuButton,
    Message,
    MessageId,
    Poll,
    SentWebAppMessage,
    StarTransactions,
    Sticker,
    StickerSet,
    Update,
    User,
    UserChatBoosts,
    UserProfilePhotos,
    WebhookInfo,
)


class BotApi:
    """Bot API methods as coroutines.

    ``await bot(SendMessage(chat_id=7, text="hi"))`` and
    ``await bot.send_message(chat_id=7, text="hi")`` are equivalent: each
    serializes the parameter object, makes exactly one HTTP call and decodes
    the result into the method's declared type.
    """

    def __init__(self, client: TelegramApiClient) -> None:
        self.client = client

    async def __call__(self, method: TelegramMethod) -> Any:
        result = await self.client.call_method(method.api_method, serialize_params(method))
        return method.parse_result(result)

    # Messages

    async def get_me(self, **params: Any) -> User:
        return await self(methods.GetMe(**params))

    async def log_out(self, **params: Any) -> bool:
        return await self(methods.LogOut(**params))

    async def close(self, **params: Any) -> bool:
        return await self(methods.Close(**params))

    async def send_message(self, **params: Any) -> Message:
        return await self(methods.SendMessage(**params))

    async def forward_message(self, **params: Any) -> Message:
        return await self(methods.ForwardMessage(**params))

    async def forward_messages(self, **params: Any) -> list[MessageId]:
        return await self(methods.ForwardMessages(**params))

    async def copy_message(self, **params: Any) -> MessageId:
        return await self(methods.CopyMessage(**params))

    async def copy_messages(self, **params: Any) -> list[MessageId]:
        return await self(methods.CopyMessages(**params))

    async def send_photo(self, **params: Any) -> Message:
        return await self(methods.SendPhoto(**params))

    async def send_audio(self, **params: Any) -> Message:
        return await self(methods.SendAudio(**params))

    async def send_document(self, **params: Any) -> Message:
        return await self(methods.SendDocument(**params))

    async def send_video(self, **params: Any) -> Message:
        return await self(methods.SendVideo(**params))

    async def send_animation(self, **params: Any) -> Message:
        return await self(methods.SendAnimation(**params))

    async def send_voice(self, **params: Any) -> Message:
        return await self(methods.SendVoice(**params))

    async def send_video_note(self, **params: Any) -> Message:
        return await self(methods.SendVideoNote(**params))

    async def send_paid_media(self, **params: Any) -> Message:
        return await self(methods.SendPaidMedia(**params))

    async def send_media_group(self, **params: Any) -> list[Message]:
        return await self(methods.SendMediaGroup(**params))

    async def send_location(self, **params: Any) -> Message:
        return await self(methods.SendLocation(**params))

    async def send_venue(self, **params: Any) -> Message:
        return await self(methods.SendVenue(**params))

    async def send_contact(self, **params: Any) -> Message:
        return await self(methods.SendContact(**params))

    async def send_poll(self, **params: Any) -> Message:
        return await self(methods.SendPoll(**params))

    async def send_dice(self, **params: Any) -> Message:
        return await self(methods.SendDice(**params))

    async def send_chat_action(self, **params: Any) -> bool:
        return await self(methods.SendChatAction(**params))

    async def set_message_reaction(self, **params: Any) -> bool:
        return await self(methods.SetMessageReaction(**params))

    async def get_user_profile_photos(self, **params: Any) -> UserProfilePhotos:
        return await self(methods.GetUserProfilePhotos(**params))

    async def get_file(self, **params: Any) -> File:
        return await self(methods.GetFile(**params))

    # Chat administration and forum topics

    async def ban_chat_member(self, **params: Any) -> bool:
        return await self(methods.BanChatMember(**params))

    async def unban_chat_member(self, **params: Any) -> bool:
        return await self(methods.UnbanChatMember(**params))

    async def restrict_chat_member(self, **params: Any) -> bool:
        return await self(methods.RestrictChatMember(**params))

    async def promote_chat_member(self, **params: Any) -> bool:
        return await self(methods.PromoteChatMember(**params))

    async def set_chat_administrator_custom_title(self, **params: Any) -> bool:
        return await self(methods.SetChatAdministratorCustomTitle(**params))

    async def ban_chat_sender_chat(self, **params: Any) -> bool:
        return await self(methods.BanChatSenderChat(**params))

    async def unban_chat_sender_chat(self, **params: Any) -> bool:
        return await self(methods.UnbanChatSenderChat(**params))

    async def set_chat_permissions(self, **params: Any) -> bool:
        return await self(methods.SetChatPermissions(**params))

    async def export_chat_invite_link(self, **params: Any) -> str:
        return await self(methods.ExportChatInviteLink(**params))

    async def create_chat_invite_link(self, **params: Any) -> ChatInviteLink:
        return await self(methods.CreateChatInviteLink(**params))

    async def edit_chat_invite_link(self, **params: Any) -> ChatInviteLink:
        return await self(methods.EditChatInviteLink(**params))

    async def create_chat_subscription_invite_link(self, **params: Any) -> ChatInviteLink:
        return await self(methods.CreateChatSubscriptionInviteLink(**params))

    async def edit_chat_subscription_invite_link(self, **params: Any) -> ChatInviteLink:
        return await self(methods.EditChatSubscriptionInviteLink(**params))

    async def revoke_chat_invite_link(self, **params: Any) -> ChatInviteLink:
        return await self(methods.RevokeChatInviteLink(**params))

    async def approve_chat_join_request(self, **params: Any) -> bool:
        return await self(methods.ApproveChatJoinRequest(**params))

    async def decline_chat_join_request(self, **params: Any) -> bool:
        return await self(methods.DeclineChatJoinRequest(**params))

    async def set_chat_photo(self, **params: Any) -> bool:
        return await self(methods.SetChatPhoto(**params))

    async def delete_chat_photo(self, **params: Any) -> bool:
        return await self(methods.DeleteChatPhoto(**params))

    async def set_chat_title(self, **params: Any) -> bool:
        return await self(methods.SetChatTitle(**params))

    async def set_chat_description(self, **params: Any) -> bool:
        return await self(methods.SetChatDescription(**params))

    async def pin_chat_message(self, **params: Any) -> bool:
        return await self(methods.PinChatMessage(**params))

    async def unpin_chat_message(self, **params: Any) -> bool:
        return await self(methods.UnpinChatMessage(**params))

    async def unpin_all_chat_messages(self, **params: Any) -> bool:
        return await self(methods.UnpinAllChatMessages(**params))

    async def leave_chat(self, **params: Any) -> bool:
        return await self(methods.LeaveChat(**params))

    async def get_chat(self, **params: Any) -> ChatFullInfo:
        return await self(methods.GetChat(**params))

    async def get_chat_administrators(self, **params: Any) -> list[ChatMember]:
        return await self(methods.GetChatAdministrators(**params))

    async def get_chat_member_count(self, **params: Any) -> int:
        return await self(methods.GetChatMemberCount(**params))

    async def get_chat_member(self, **params: Any) -> ChatMember:
        return await self(methods.GetChatMember(**params))

    async def set_chat_sticker_set(self, **params: Any) -> bool:
        return await self(methods.SetChatStickerSet(**params))

    async def delete_chat_sticker_set(self, **params: Any) -> bool:
        return await self(methods.DeleteChatStickerSet(**params))

    async def get_forum_topic_icon_stickers(self, **params: Any) -> list[Sticker]:
        return await self(methods.GetForumTopicIconStickers(**params))

    async def create_forum_topic(self, **params: Any) -> ForumTopic:
        return await self(methods.CreateForumTopic(**params))

    async def edit_forum_topic(self, **params: Any) -> bool:
        return await self(methods.EditForumTopic(**params))

    async def close_forum_topic(self, **params: Any) -> bool:
        return await self(methods.CloseForumTopic(**params))

    async def reopen_forum_topic(self, **params: Any) -> bool:
        return await self(methods.ReopenForumTopic(**params))

    async def delete_forum_topic(self, **params: Any) -> bool:
        return await self(methods.DeleteForumTopic(**params))

    async def unpin_all_forum_topic_messages(self, **params: Any) -> bool:
        return await self(methods.UnpinAllForumTopicMessages(**params))

    async def edit_general_forum_topic(self, **params: Any) -> bool:
        return await self(methods.EditGeneralForumTopic(**params))

    async def close_general_forum_topic(self, **params: Any) -> bool:
        return await self(methods.CloseGeneralForumTopic(**params))

    async def reopen_general_forum_topic(self, **params: Any) -> bool:
        return await self(methods.ReopenGeneralForumTopic(**params))

    async def hide_general_forum_topic(self, **params: Any) -> bool:
        return await self(methods.HideGeneralForumTopic(**params))

    async def unhide_general_forum_topic(self, **params: Any) -> bool:
        return await self(methods.UnhideGeneralForumTopic(**params))

    async def unpin_all_general_forum_topic_messages(self, **params: Any) -> bool:
        return await self(methods.UnpinAllGeneralForumTopicMessages(**params))

    # Callback answers and bot profile

    async def answer_callback_query(self, **params: Any) -> bool:
        return await self(methods.AnswerCallbackQuery(**params))

    async def get_user_chat_boosts(self, **params: Any) -> UserChatBoosts:
        return await self(methods.GetUserChatBoosts(**params))

    async def get_business_connection(self, **params: Any) -> BusinessConnection:
        return await self(methods.GetBusinessConnection(**params))

    async def set_my_commands(self, **params: Any) -> bool:
        return await self(methods.SetMyCommands(**params))

    async def delete_my_commands(self, **params: Any) -> bool:
        return await self(methods.DeleteMyCommands(**params))

    async def get_my_commands(self, **params: Any) -> list[BotCommand]:
        return await self(methods.GetMyCommands(**params))

    async def set_my_name(self, **params: Any) -> bool:
        return await self(methods.SetMyName(**params))

    async def get_my_name(self, **params: Any) -> BotName:
        return await self(methods.GetMyName(**params))

    async def set_my_description(self, **params: Any) -> bool:
        return await self(methods.SetMyDescription(**params))

    async def get_my_description(self, **params: Any) -> BotDescription:
        return await self(methods.GetMyDescription(**params))

    async def set_my_short_description(self, **params: Any) -> bool:
        return await self(methods.SetMyShortDescription(**params))

    async def get_my_short_description(self, **params: Any) -> BotShortDescription:
        return await self(methods.GetMyShortDescription(**params))

    async def set_chat_menu_button(self, **params: Any) -> bool:
        return await self(methods.SetChatMenuButton(**params))

    async def get_chat_menu_button(self, **params: Any) -> MenuButton:
        return await self(methods.GetChatMenuButton(**params))

    async def set_my_default_administrator_rights(self, **params: Any) -> bool:
        return await self(methods.SetMyDefaultAdministratorRights(**params))

    async def get_my_default_administrator_rights(self, **params: Any) -> ChatAdministratorRights:
        return await self(methods.GetMyDefaultAdministratorRights(**params))

    # Updates and webhooks

    async def get_updates(self, **params: Any) -> list[Update]:
        return await self(methods.GetUpdates(**params))

    async def set_webhook(self, **params: Any) -> bool:
        return await self(methods.SetWebhook(**params))

    async def delete_webhook(self, **params: Any) -> bool:
        return await self(methods.DeleteWebhook(**params))

    async def get_webhook_info(self, **params: Any) -> WebhookInfo:
        return await self(methods.GetWebhookInfo(**params))

    # Editing messages

    async def edit_message_text(self, **params: Any) -> Message | bool:
        return await self(methods.EditMessageText(**params))

    async def edit_message_caption(self, **params: Any) -> Message | bool:
        return await self(methods.EditMessageCaption(**params))

    async def edit_message_media(self, **params: Any) -> Message | bool:
        return await self(methods.EditMessageMedia(**params))

    async def edit_message_live_location(self, **params: Any) -> Message | bool:
        return await self(methods.EditMessageLiveLocation(**params))

    async def stop_message_live_location(self, **params: Any) -> Message | bool:
        return await self(methods.StopMessageLiveLocation(**params))

    async def edit_message_reply_markup(self, **params: Any) -> Message | bool:
        return await self(methods.EditMessageReplyMarkup(**params))

    async def stop_poll(self, **params: Any) -> Poll:
        return await self(methods.StopPoll(**params))

    async def delete_message(self, **params: Any) -> bool:
        return await self(methods.DeleteMessage(**params))

    async def delete_messages(self, **params: Any) -> bool:
        return await self(methods.DeleteMessages(**params))

    # Stickers

    async def send_sticker(self, **params: Any) -> Message:
        return await self(methods.SendSticker(**params))

    async def get_sticker_set(self, **params: Any) -> StickerSet:
        return await self(methods.GetStickerSet(**params))

    async def get_custom_emoji_stickers(self, **params: Any) -> list[Sticker]:
        return await self(methods.GetCustomEmojiStickers(**params))

    async def upload_sticker_file(self, **params: Any) -> File:
        return await self(methods.UploadStickerFile(**params))

    async def create_new_sticker_set(self, **params: Any) -> bool:
        return await self(methods.CreateNewStickerSet(**params))

    async def add_sticker_to_set(self, **params: Any) -> bool:
        return await self(methods.AddStickerToSet(**params))

    async def set_sticker_position_in_set(self, **params: Any) -> bool:
        return await self(methods.SetStickerPositionInSet(**params))

    async def delete_sticker_from_set(self, **params: Any) -> bool:
        return await self(methods.DeleteStickerFromSet(**params))

    async def replace_sticker_in_set(self, **params: Any) -> bool:
        return await self(methods.ReplaceStickerInSet(**params))

    async def set_sticker_emoji_list(self, **params: Any) -> bool:
        return await self(methods.SetStickerEmojiList(**params))

    async def set_sticker_keywords(self, **params: Any) -> bool:
        return await self(methods.SetStickerKeywords(**params))

    async def set_sticker_mask_position(self, **params: Any) -> bool:
        return await self(methods.SetStickerMaskPosition(**params))

    async def set_sticker_set_title(self, **params: Any) -> bool:
        return await self(methods.SetStickerSetTitle(**params))

    async def set_sticker_set_thumbnail(self, **params: Any) -> bool:
        return await self(methods.SetStickerSetThumbnail(**params))

    async def set_custom_emoji_sticker_set_thumbnail(self, **params: Any) -> bool:
        return await self(methods.SetCustomEmojiStickerSetThumbnail(**params))

    async def delete_sticker_set(self, **params: Any) -> bool:
        return await self(methods.DeleteStickerSet(**params))

    # Inline mode

    async def answer_inline_query(self, **params: Any) -> bool:
        return await self(methods.AnswerInlineQuery(**params))

    async def answer_web_app_query(self, **params: Any) -> SentWebAppMessage:
        return await self(methods.AnswerWebAppQuery(**params))

    # Payments

    async def send_invoice(self, **params: Any) -> Message:
        return await self(methods.SendInvoice(**params))

    async def create_invoice_link(self, **params: Any) -> str:
        return await self(methods.CreateInvoiceLink(**params))

    async def answer_shipping_query(self, **params: Any) -> bool:
        return await self(methods.AnswerShippingQuery(**params))

    async def answer_pre_checkout_query(self, **params: Any) -> bool:
        return await self(methods.AnswerPreCheckoutQuery(**params))

    async def get_star_transactions(self, **params: Any) -> StarTransactions:
        return await self(methods.GetStarTransactions(**params))

    async def refund_star_payment(self, **params: Any) -> bool:
        return await self(methods.RefundStarPayment(**params))

    # Telegram Passport

    async def set_passport_data_errors(self, **params: Any) -> bool:
        return await self(methods.SetPassportDataErrors(**params))

    # Games

    async def send_game(self, **params: Any) -> Message:
        return await self(methods.SendGame(**params))

    async def set_game_score(self, **params: Any) -> Message | bool:
        return await self(methods.SetGameScore(**params))

    async def get_game_high_scores(self, **params: Any) -> list[GameHighScore]:
        return await self(methods.GetGameHighScores(**params))
