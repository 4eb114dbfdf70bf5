from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from ..constants import TRACK_OPTIONAL_FIELD, TRACKS

Track = Literal["startup", "project", "research", "hackathon"]

REQUIRED_FIELDS: tuple[str, ...] = ("title", "description", "track")
OPTIONAL_FIELDS: tuple[str, ...] = ("target_audience", "timeline", "budget", "keywords")


def _utf8_text(v: str) -> str:
    # Lone surrogates survive json.loads but cannot be serialised back out.
    try:
        v.encode("utf-8")
    except UnicodeEncodeError:
        raise ValueError("must be valid UTF-8 text") from None
    return v


class SubmissionValidationError(ValueError):
    """Raised when a submission payload fails schema validation.

    ``field`` is the wire (camelCase) name of the first offending field.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class Submission(BaseModel):
    """An idea submitted for evaluation.

    ``title`` and ``description`` keep their raw, untrimmed value: the
    scoring engine measures raw length. Required fields of the wrong type
    are rejected rather than coerced; optional fields also accept numbers
    and booleans, stored as text. Unknown keys are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    title: StrictStr
    description: StrictStr
    track: Track
    target_audience: Optional[StrictStr] = None
    timeline: Optional[StrictStr] = None
    budget: Optional[StrictStr] = None
    keywords: Optional[StrictStr] = None

    @field_validator("title", "description")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return _utf8_text(v)

    @field_validator(*OPTIONAL_FIELDS, mode="before")
    @classmethod
    def scalar_to_text(cls, v: Any) -> Any:
        """Accept numbers and booleans for optional fields.

        A falsy scalar (0, False) counts as absent.
        """
        if isinstance(v, (bool, int, float)):
            return str(v) if v else None
        return v

    @field_validator(*OPTIONAL_FIELDS)
    @classmethod
    def optional_utf8(cls, v: Optional[str]) -> Optional[str]:
        return v if v is None else _utf8_text(v)

    @property
    def track_detail_field(self) -> str:
        """Name of the optional field that matters for this track."""
        return optional_field_for(self.track)

    def has_track_detail(self) -> bool:
        return bool(getattr(self, self.track_detail_field))

    def audience_length(self) -> int:
        """Trimmed length of the target audience, 0 when absent."""
        return len(self.target_audience.strip()) if self.target_audience else 0


def optional_field_for(track: str) -> str:
    return TRACK_OPTIONAL_FIELD[track]


def _field_error_message(field: str) -> str:
    if field == "track":
        return (
            "Missing or invalid required field: track "
            f"(must be one of: {', '.join(TRACKS)})"
        )
    if field in REQUIRED_FIELDS:
        return f"Missing or invalid required field: {field}"
    return f"Invalid optional field: {field} (must be UTF-8 text, a number or a boolean)"


def parse_submission(data: Mapping[str, Any]) -> Submission:
    """Validate a decoded JSON object into a :class:`Submission`.

    Raises
    ------
    SubmissionValidationError
        Naming the first offending field. Required fields are reported
        in declaration order (title, description, track).
    """
    try:
        return Submission.model_validate(data)
    except ValidationError as exc:
        fields = [str(err["loc"][0]) for err in exc.errors() if err.get("loc")]
        ordered = [f for f in REQUIRED_FIELDS if f in fields] + [
            f for f in fields if f not in REQUIRED_FIELDS
        ]
        field = ordered[0] if ordered else "body"
        raise SubmissionValidationError(field, _field_error_message(field)) from exc
