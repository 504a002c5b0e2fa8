from datetime import date
from enum import Enum
from typing import Annotated, List, Optional

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)

MIN_YEAR = 1900


class Genre(str, Enum):
    ACTION = "Action"
    ADVENTURE = "Adventure"
    ANIMATION = "Animation"
    BIOGRAPHY = "Biography"
    COMEDY = "Comedy"
    CRIME = "Crime"
    DRAMA = "Drama"
    FANTASY = "Fantasy"
    HORROR = "Horror"
    ROMANCE = "Romance"
    SCI_FI = "Sci-Fi"
    THRILLER = "Thriller"


def max_release_year() -> int:
    return date.today().year + 1


_url_adapter = TypeAdapter(AnyUrl)


def check_url(value: str) -> str:
    # Validate as a URL but keep the string exactly as the client sent it.
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("poster must be a valid URL") from None
    return value


Title = Annotated[StrictStr, Field(min_length=1)]
Year = Annotated[StrictInt, Field(ge=MIN_YEAR)]
Duration = Annotated[StrictInt, Field(gt=0)]
Rating = Annotated[StrictFloat, Field(ge=0, le=10)]
PosterUrl = Annotated[StrictStr, AfterValidator(check_url)]
Genres = Annotated[List[Genre], Field(min_length=1)]


class MovieFieldRules(BaseModel):
    """Checks shared by full and partial movie payloads."""
    model_config = ConfigDict(extra="forbid")

    @field_validator("year", check_fields=False)
    @classmethod
    def check_year(cls, value: int) -> int:
        upper = max_release_year()
        if value > upper:
            raise ValueError(f"year must be less than or equal to {upper}")
        return value

    @field_validator("genre", check_fields=False)
    @classmethod
    def dedupe_genres(cls, value: List[Genre]) -> List[Genre]:
        return list(dict.fromkeys(value))


class MovieCreate(MovieFieldRules):
    """Body of POST /movies. Every field is required, nothing else is accepted."""
    title: Title
    year: Year
    director: Title
    duration: Duration
    rating: Rating
    poster: PosterUrl
    genre: Genres


class MovieUpdate(MovieFieldRules):
    """Body of PATCH /movies/{id}. Any subset of the create fields, at least one."""
    title: Optional[Title] = None
    year: Optional[Year] = None
    director: Optional[Title] = None
    duration: Optional[Duration] = None
    rating: Optional[Rating] = None
    poster: Optional[PosterUrl] = None
    genre: Optional[Genres] = None

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value):
        # Defaults are not validated, so this only sees explicit nulls.
        if value is None:
            raise ValueError("field may be omitted but not null")
        return value

    @model_validator(mode="after")
    def require_one_field(self):
        if not self.model_fields_set:
            raise ValueError("at least one movie field must be provided")
        return self


class Movie(BaseModel):
    """A stored record as returned by the API."""
    model_config = ConfigDict(extra="allow")

    id: str
    title: str
    year: int
    director: str
    duration: int
    rating: float
    poster: str
    genre: List[str]


class MessageResponse(BaseModel):
    message: str
