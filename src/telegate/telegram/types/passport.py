from typing import Annotated, Literal, Union

from pydantic import Field

from telegate.telegram.types.base import TelegramObject


class _PassportElementError(TelegramObject):
    type: str
    message: str


class PassportElementErrorDataField(_PassportElementError):
    source: Literal["data"] = "data"
    field_name: str
    data_hash: str


class PassportElementErrorFrontSide(_PassportElementError):
    source: Literal["front_side"] = "front_side"
    file_hash: str


class PassportElementErrorReverseSide(_PassportElementError):
    source: Literal["reverse_side"] = "reverse_side"
    file_hash: str


class PassportElementErrorSelfie(_PassportElementError):
    source: Literal["selfie"] = "selfie"
    file_hash: str


class PassportElementErrorFile(_PassportElementError):
    source: Literal["file"] = "file"
    file_hash: str


class PassportElementErrorFiles(_PassportElementError):
    source: Literal["files"] = "files"
    file_hashes: list[str]


class PassportElementErrorTranslationFile(_PassportElementError):
    source: Literal["translation_file"] = "translation_file"
    file_hash: str


class PassportElementErrorTranslationFiles(_PassportElementError):
    source: Literal["translation_files"] = "translation_files"
    file_hashes: list[str]


class PassportElementErrorUnspecified(_PassportElementError):
    source: Literal["unspecified"] = "unspecified"
    element_hash: str


PassportElementError = Annotated[
    Union[
        PassportElementErrorDataField,
        PassportElementErrorFrontSide,
        PassportElementErrorReverseSide,
        PassportElementErrorSelfie,
        PassportElementErrorFile,
        PassportElementErrorFiles,
        PassportElementErrorTranslationFile,
        PassportElementErrorTranslationFiles,
        PassportElementErrorUnspecified,
    ],
    Field(discriminator="source"),
]
