"""Bot API object models."""

from .base import TelegramObject
from .bot import (
    BotCommand,
    BotCommandScope,
    BotCommandScopeAllChatAdministrators,
    BotCommandScopeAllGroupChats,
    BotCommandScopeAllPrivateChats,
    BotCommandScopeChat,
    BotCommandScopeChatAdministrators,
    BotCommandScopeChatMember,
    BotCommandScopeDefault,
    BotDescription,
    BotName,
    BotShortDescription,
    MenuButton,
    MenuButtonCommands,
    MenuButtonDefault,
    MenuButtonWebApp,
)
from .chat import (
    BusinessConnection,
    BusinessMessagesDeleted,
    Chat,
    ChatAdministratorRights,
    ChatBoost,
    ChatBoostRemoved,
    ChatBoostUpdated,
    ChatInviteLink,
    ChatJoinRequest,
    ChatMember,
    ChatMemberAdministrator,
    ChatMemberBanned,
    ChatMemberLeft,
    ChatMemberMember,
    ChatMemberOwner,
    ChatMemberRestricted,
    ChatMemberUpdated,
    ChatPermissions,
    ForumTopic,
    MessageReactionCountUpdated,
    MessageReactionUpdated,
    ReactionType,
    ReactionTypeCustomEmoji,
    ReactionTypeEmoji,
    ReactionTypePaid,
    UserChatBoosts,
)
from .formatting import LinkPreviewOptions, MessageEntity, ReplyParameters, TextQuote
from .games import Game, GameHighScore
from .inline import (
    ChosenInlineResult,
    InlineQuery,
    InlineQueryResult,
    InlineQueryResultArticle,
    InlineQueryResultsButton,
    InputTextMessageContent,
    SentWebAppMessage,
)
from .input import (
    InputMedia,
    InputMediaAnimation,
    InputMediaAudio,
    InputMediaDocument,
    InputMediaPhoto,
    InputMediaVideo,
    InputPaidMedia,
    InputSticker,
)
from .markup import (
    ForceReply,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    KeyboardButton,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
    ReplyMarkup,
)
from .media import (
    Animation,
    Audio,
    Contact,
    Dice,
    Document,
    File,
    Location,
    MaskPosition,
    PhotoSize,
    Sticker,
    StickerSet,
    UserProfilePhotos,
    Venue,
    Video,
    VideoNote,
    Voice,
)
from .message import CallbackQuery, ChatFullInfo, InaccessibleMessage, Message, MessageId
from .passport import PassportElementError
from .payments import (
    LabeledPrice,
    PreCheckoutQuery,
    ShippingOption,
    ShippingQuery,
    StarTransactions,
)
from .poll import InputPollOption, Poll, PollAnswer
from .update import Update, UpdateEvent, UpdateKind
from .user import User, WebAppInfo
from .webhook import ApiResponse, ResponseParameters, WebhookInfo

__all__ = [
    "Animation",
    "ApiResponse",
    "Audio",
    "BotCommand",
    "BotCommandScope",
    "BotCommandScopeAllChatAdministrators",
    "BotCommandScopeAllGroupChats",
    "BotCommandScopeAllPrivateChats",
    "BotCommandScopeChat",
    "BotCommandScopeChatAdministrators",
    "BotCommandScopeChatMember",
    "BotCommandScopeDefault",
    "BotDescription",
    "BotName",
    "BotShortDescription",
    "BusinessConnection",
    "BusinessMessagesDeleted",
    "CallbackQuery",
    "Chat",
    "ChatAdministratorRights",
    "ChatBoost",
    "ChatBoostRemoved",
    "ChatBoostUpdated",
    "ChatFullInfo",
    "ChatInviteLink",
    "ChatJoinRequest",
    "ChatMember",
    "ChatMemberAdministrator",
    "ChatMemberBanned",
    "ChatMemberLeft",
    "ChatMemberMember",
    "ChatMemberOwner",
    "ChatMemberRestricted",
    "ChatMemberUpdated",
    "ChatPermissions",
    "ChosenInlineResult",
    "Contact",
    "Dice",
    "Document",
    "File",
    "ForceReply",
    "ForumTopic",
    "Game",
    "GameHighScore",
    "InaccessibleMessage",
    "InlineKeyboardButton",
    "InlineKeyboardMarkup",
    "InlineQuery",
    "InlineQueryResult",
    "InlineQueryResultArticle",
    "InlineQueryResultsButton",
    "InputMedia",
    "InputMediaAnimation",
    "InputMediaAudio",
    "InputMediaDocument",
    "InputMediaPhoto",
    "InputMediaVideo",
    "InputPaidMedia",
    "InputPollOption",
    "InputSticker",
    "InputTextMessageContent",
    "KeyboardButton",
    "LabeledPrice",
    "LinkPreviewOptions",
    "Location",
    "MaskPosition",
    "MenuButton",
    "MenuButtonCommands",
    "MenuButtonDefault",
    "MenuButtonWebApp",
    "Message",
    "MessageEntity",
    "MessageId",
    "MessageReactionCountUpdated",
    "MessageReactionUpdated",
    "PassportElementError",
    "PhotoSize",
    "Poll",
    "PollAnswer",
    "PreCheckoutQuery",
    "ReactionType",
    "ReactionTypeCustomEmoji",
    "ReactionTypeEmoji",
    "ReactionTypePaid",
    "ReplyKeyboardMarkup",
    "ReplyKeyboardRemove",
    "ReplyMarkup",
    "ReplyParameters",
    "ResponseParameters",
    "SentWebAppMessage",
    "ShippingOption",
    "ShippingQuery",
    "StarTransactions",
    "Sticker",
    "StickerSet",
    "TelegramObject",
    "TextQuote",
    "Update",
    "UpdateEvent",
    "UpdateKind",
    "User",
    "UserChatBoosts",
    "UserProfilePhotos",
    "Venue",
    "Video",
    "VideoNote",
    "Voice",
    "WebAppInfo",
    "WebhookInfo",
]
