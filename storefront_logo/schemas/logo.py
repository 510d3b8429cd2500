"""Logo request/response schemas.

Field names are camelCase on the wire (``imageUrl``, ``fontFamily``) and
snake_case in Python; both spellings are accepted on input.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_FONT_FAMILY = "Arial"
DEFAULT_FONT_SIZE = 24
DEFAULT_COLOR = "#007AFF"
DEFAULT_FONT_WEIGHT = 700
DEFAULT_LAYOUT = "left-right"


class LogoRequest(BaseModel):
    """POST body for /logo/update.

    ``type`` stays a plain string so empty or unknown values reach the
    endpoint validator rather than failing schema parsing.
    """

    model_config = ConfigDict(populate_by_name=True)

    type: str | None = "text"  # text, image, combined
    text: str | None = None
    image_url: str | None = Field(None, alias="imageUrl")
    font_family: str = Field(DEFAULT_FONT_FAMILY, alias="fontFamily")
    font_size: int = Field(DEFAULT_FONT_SIZE, alias="fontSize")
    color: str = DEFAULT_COLOR
    font_weight: int = Field(DEFAULT_FONT_WEIGHT, alias="fontWeight")
    text_effect: str = Field("none", alias="textEffect")  # none, shadow, stroke, gradient
    layout: str = DEFAULT_LAYOUT  # left-right, top-bottom, right-left, bottom-top
    spacing: int = 8
    alignment: str = "center"  # left, center, right
    width: int = 150
    height: int = 50
    name: str = ""


class LogoSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    type: str
    text: str = ""
    image_url: str = Field("", alias="imageUrl")
    font_family: str = Field(DEFAULT_FONT_FAMILY, alias="fontFamily")
    font_size: int = Field(DEFAULT_FONT_SIZE, alias="fontSize")
    color: str = DEFAULT_COLOR
    font_weight: int = Field(DEFAULT_FONT_WEIGHT, alias="fontWeight")
    text_effect: str = Field("none", alias="textEffect")
    layout: str = DEFAULT_LAYOUT
    spacing: int = 8
    alignment: str = "center"
    width: int = 150
    height: int = 50
    is_active: bool = Field(True, alias="isActive")
    created_time: datetime | None = Field(None, alias="createdTime")
    updated_time: datetime | None = Field(None, alias="updatedTime")


class LogoResponse(BaseModel):
    success: bool
    message: str
    logo: LogoSchema | None = None


class FontInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    display_name: str = Field(..., alias="displayName")
    category: str  # chinese, english, artistic
    is_available: bool = Field(True, alias="isAvailable")


class LogoPreview(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: str
    text: str | None = None
    image_url: str | None = Field(None, alias="imageUrl")
    font_family: str = Field(DEFAULT_FONT_FAMILY, alias="fontFamily")
    font_size: int = Field(DEFAULT_FONT_SIZE, alias="fontSize")
    color: str = DEFAULT_COLOR
    font_weight: int = Field(DEFAULT_FONT_WEIGHT, alias="fontWeight")
    layout: str = DEFAULT_LAYOUT
