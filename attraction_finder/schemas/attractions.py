"""
Pydantic schemas for the attraction list and detail flows.

These models define the strict request/response contracts for the
attraction recommendation system powered by Gemini with Google Maps
grounding. The domain models (Attraction, AttractionDetail, ...) are
shared by the service layer and the HTTP layer.
"""

from enum import Enum
from typing import List, Literal, Union
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, computed_field

NAVIGATION_URL_TEMPLATE = "https://www.google.com/maps/dir/?api=1&destination={latitude},{longitude}"
IMAGE_URL_TEMPLATE = "https://picsum.photos/seed/{seed}/600/400"


# ============================================================================
# SELECTION ENUMS
# ============================================================================

class CategoryOption(str, Enum):
    """Attraction category selected by the user."""
    ALL = "all"
    NATURE = "nature"
    CULTURE = "culture"
    FOOD = "food"
    SHOPPING = "shopping"
    ENTERTAINMENT = "entertainment"


class DistanceOption(str, Enum):
    """Search radius selected by the user."""
    KM_1 = "1km"
    KM_5 = "5km"
    KM_10 = "10km"


# ============================================================================
# DOMAIN MODELS
# ============================================================================

class Coordinates(BaseModel):
    """
    A latitude/longitude pair.

    Coordinates parsed out of model replies are trusted as returned; no
    range check is applied here (see AttractionQueryRequest for user input).
    """
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., description="Latitude in decimal degrees", examples=[25.0330])
    longitude: float = Field(..., description="Longitude in decimal degrees", examples=[121.5654])


class Attraction(BaseModel):
    """
    A single recommended attraction, built from one parsed reply line.

    Immutable. Has no stable id: it is identified by its position in the
    list it came from.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Attraction name", examples=["台北101"])
    description: str = Field(..., description="Short description", examples=["知名摩天大樓"])
    address: str = Field(..., description="Street address", examples=["台北市信義區"])
    coordinates: Coordinates

    @computed_field  # type: ignore[misc]
    @property
    def navigation_url(self) -> str:
        """Google Maps directions deep link to this attraction."""
        return NAVIGATION_URL_TEMPLATE.format(
            latitude=self.coordinates.latitude,
            longitude=self.coordinates.longitude,
        )

    @computed_field  # type: ignore[misc]
    @property
    def image_url(self) -> str:
        """Placeholder image keyed by the attraction name."""
        return IMAGE_URL_TEMPLATE.format(seed=quote(self.name, safe=""))


class GroundingReference(BaseModel):
    """A Google Maps source link returned alongside the list reply."""
    uri: str = Field(..., description="Google Maps link", examples=["https://maps.google.com/?cid=123"])
    title: str = Field("", description="Place title (may be empty)", examples=["台北101"])


class Review(BaseModel):
    text: str = Field(..., description="一條關於景點的評論。")


class AttractionDetail(BaseModel):
    """
    Detail content for one attraction.

    Also passed to Gemini as the response_schema of the detail request, so
    the field descriptions below are part of the prompt.
    """
    description: str = Field(..., description="景點的詳細描述，包含歷史、特色、推薦參觀重點。")
    traffic: str = Field(..., description="前往景點的交通方式。")
    reviews: List[Review] = Field(..., description="關於景點的評論列表。")


class ParsedAttractions(BaseModel):
    """Outcome of parsing one list reply."""
    attractions: List[Attraction] = Field(default_factory=list)
    dropped_lines: List[str] = Field(
        default_factory=list,
        description="Non-blank lines that did not follow the line grammar"
    )


class AttractionList(BaseModel):
    """Outcome of the list flow."""
    attractions: List[Attraction] = Field(default_factory=list)
    grounding_references: List[GroundingReference] = Field(default_factory=list)
    dropped_line_count: int = 0


# ============================================================================
# REQUEST MODELS
# ============================================================================

class AttractionQueryRequest(BaseModel):
    """
    Request for nearby attractions.

    The front end acquires the coordinates with the browser's geolocation
    API (see GET /geolocation/options) and sends them with the selections.
    """
    latitude: float = Field(..., ge=-90, le=90, examples=[25.0330])
    longitude: float = Field(..., ge=-180, le=180, examples=[121.5654])
    category: CategoryOption = Field(
        CategoryOption.ALL,
        description="Attraction category filter"
    )
    distance: DistanceOption = Field(
        DistanceOption.KM_5,
        description="Search radius"
    )

    def to_coordinates(self) -> Coordinates:
        return Coordinates(latitude=self.latitude, longitude=self.longitude)


class AttractionDetailRequest(BaseModel):
    """Request for the detail view of one attraction."""
    name: str = Field(
        ...,
        description="Attraction name as returned by /attractions/query",
        min_length=1,
        max_length=200,
        examples=["台北101"]
    )


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class AttractionQueryResponseOK(BaseModel):
    """
    Response when at least one attraction was parsed.

    dropped_line_count > 0 means the reply was only partially parseable;
    the front end may show a hint but the list is still usable.
    """
    status: Literal["OK"] = "OK"
    attractions: List[Attraction] = Field(..., min_length=1)
    grounding_references: List[GroundingReference] = Field(default_factory=list)
    dropped_line_count: int = Field(0, ge=0)


class AttractionQueryResponseEmpty(BaseModel):
    """
    Response when the reply contained no line following the grammar.

    This is a valid outcome, distinct from a backend failure. Grounding
    references are only shown alongside attractions, so none are returned.
    """
    status: Literal["NO_ATTRACTIONS"] = "NO_ATTRACTIONS"
    reason: str = Field(
        ...,
        examples=["AI 回應的格式不正確，無法解析景點。"]
    )


class AttractionDetailResponse(BaseModel):
    status: Literal["OK"] = "OK"
    name: str
    detail: AttractionDetail


class ErrorResponse(BaseModel):
    """Body of every error response (wrapped in FastAPI's "detail" key)."""
    error: str = Field(..., examples=["backend_rate_limited"])
    details: str = Field(..., examples=["API 錯誤: 請求過多 (429) 或額度已滿。請稍後再試。"])


# FastAPI selects the model based on status
AttractionQueryResponse = Union[AttractionQueryResponseOK, AttractionQueryResponseEmpty]
