"""Place API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.application.dtos.place import PlaceResult


class PlaceFields(BaseModel):
    """Writable place attributes. Strings are trimmed server-side."""

    name: str | None = Field(default=None, max_length=255)
    description: str | None = Field(default=None, max_length=10_000)
    address_line: str | None = Field(default=None, max_length=500)
    city: str | None = Field(default=None, max_length=255)
    state: str | None = Field(default=None, max_length=255)
    postal_code: str | None = Field(default=None, max_length=32)
    country: str | None = Field(default=None, max_length=255)
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    google_place_id: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=100)
    website_url: str | None = Field(default=None, max_length=2048)
    status: str | None = Field(default=None, max_length=50)

    @field_validator("website_url")
    @classmethod
    def _http_url(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return v
        if not v.strip().lower().startswith(("http://", "https://")):
            raise ValueError("website_url must be an http(s) URL")
        return v


class PlaceCreateRequest(PlaceFields):
    """Request body for POST /places. name is required."""

    name: str = Field(..., min_length=1, max_length=255)


class PlaceUpdateRequest(PlaceFields):
    """Request body for PATCH /places/{id}. Only fields sent are changed."""


class PlaceCreatedResponse(BaseModel):
    id: int


class OkResponse(BaseModel):
    ok: bool = True


class PlaceIndexItem(BaseModel):
    """Lightweight place for list responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    city: str | None = None
    description: str | None = None
    latitude: float | None = None
    longitude: float | None = None


class PlaceDetailResponse(PlaceIndexItem):
    """Place detail (GET /places/{id})."""

    author_id: int | None = None
    address_line: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
    full_address: str = ""
    google_place_id: str | None = None
    phone: str | None = None
    website_url: str | None = None
    status: str | None = None
    created_at: datetime

    @classmethod
    def from_result(cls, place: PlaceResult) -> "PlaceDetailResponse":
        address = place.address
        return cls(
            id=place.id,
            name=place.name,
            city=address.city,
            description=place.description,
            latitude=place.latitude,
            longitude=place.longitude,
            author_id=place.author_id,
            address_line=address.address_line,
            state=address.state,
            postal_code=address.postal_code,
            country=address.country,
            full_address=address.full_address,
            google_place_id=place.google_place_id,
            phone=place.phone,
            website_url=place.website_url,
            status=place.status,
            created_at=place.created_at,
        )


class PlaceListResponse(BaseModel):
    """Paginated place list."""

    items: list[PlaceIndexItem]
    page: int
    per_page: int
    total: int
    total_pages: int
