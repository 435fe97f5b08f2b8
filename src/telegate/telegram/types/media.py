from typing import Annotated, Literal, Union

from pydantic import Field

from telegate.telegram.types.base import TelegramObject
from telegate.telegram.types.user import User


class PhotoSize(TelegramObject):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    file_size: int | None = None


class Animation(TelegramObject):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumbnail: PhotoSize | None = None
    file_name: str | None = None
    mime_type: str | None = None
    file_size: int | None = None


class Audio(TelegramObject):
    file_id: str
    file_unique_id: str
    duration: int
    performer: str | None = None
    title: str | None = None
    file_name: str | None = None
    mime_type: str | None = None
    file_size: int | None = None
    thumbnail: PhotoSize | None = None


class Document(TelegramObject):
    file_id: str
    file_unique_id: str
    thumbnail: PhotoSize | None = None
    file_name: str | None = None
    mime_type: str | None = None
    file_size: int | None = None


class Video(TelegramObject):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumbnail: PhotoSize | None = None
    file_name: str | None = None
    mime_type: str | None = None
    file_size: int | None = None


class VideoNote(TelegramObject):
    file_id: str
    file_unique_id: str
    length: int
    duration: int
    thumbnail: PhotoSize | None = None
    file_size: int | None = None


class Voice(TelegramObject):
    file_id: str
    file_unique_id: str
    duration: int
    mime_type: str | None = None
    file_size: int | None = None


class Contact(TelegramObject):
    phone_number: str
    first_name: str
    last_name: str | None = None
    user_id: int | None = None
    vcard: str | None = None


class Dice(TelegramObject):
    emoji: str
    value: int


class Location(TelegramObject):
    latitude: float
    longitude: float
    horizontal_accuracy: float | None = None
    live_period: int | None = None
    heading: int | None = None
    proximity_alert_radius: int | None = None


class Venue(TelegramObject):
    location: Location
    title: str
    address: str
    foursquare_id: str | None = None
    foursquare_type: str | None = None
    google_place_id: str | None = None
    google_place_type: str | None = None


class File(TelegramObject):
    """A file ready to be downloaded via ``/file/bot<token>/<file_path>``."""

    file_id: str
    file_unique_id: str
    file_size: int | None = None
    file_path: str | None = None


class UserProfilePhotos(TelegramObject):
    total_count: int
    photos: list[list[PhotoSize]]


class ChatPhoto(TelegramObject):
    small_file_id: str
    small_file_unique_id: str
    big_file_id: str
    big_file_unique_id: str


class MaskPosition(TelegramObject):
    point: Literal["forehead", "eyes", "mouth", "chin"]
    x_shift: float
    y_shift: float
    scale: float


class Sticker(TelegramObject):
    file_id: str
    file_unique_id: str
    type: Literal["regular", "mask", "custom_emoji"]
    width: int
    height: int
    is_animated: bool
    is_video: bool
    thumbnail: PhotoSize | None = None
    emoji: str | None = None
    set_name: str | None = None
    premium_animation: File | None = None
    mask_position: MaskPosition | None = None
    custom_emoji_id: str | None = None
    needs_repainting: bool | None = None
    file_size: int | None = None


class StickerSet(TelegramObject):
    name: str
    title: str
    sticker_type: Literal["regular", "mask", "custom_emoji"]
    stickers: list[Sticker]
    thumbnail: PhotoSize | None = None


class Story(TelegramObject):
    chat: dict
    id: int


class PaidMediaPreview(TelegramObject):
    type: Literal["preview"]
    width: int | None = None
    height: int | None = None
    duration: int | None = None


class PaidMediaPhoto(TelegramObject):
    type: Literal["photo"]
    photo: list[PhotoSize]


class PaidMediaVideo(TelegramObject):
    type: Literal["video"]
    video: Video


PaidMedia = Annotated[
    Union[PaidMediaPreview, PaidMediaPhoto, PaidMediaVideo],
    Field(discriminator="type"),
]


class PaidMediaInfo(TelegramObject):
    star_count: int
    paid_media: list[PaidMedia]


class PaidMediaPurchased(TelegramObject):
    from_user: User = Field(alias="from")
    paid_media_payload: str
