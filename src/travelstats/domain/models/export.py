"""Träwelling export domain models.

Exports have grown fields over time and older files lack some of them, so
only the fields used by the reports are modelled and unknown keys are ignored.
Distances are in metres and durations in minutes throughout.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from travelstats.domain.models.trip_identity import TripIdentity


class _ExportModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ExportUser(_ExportModel):
    """User summary from the export's meta block."""

    id: int
    display_name: str = ""
    username: str = ""
    train_distance: int = 0  # metres
    train_duration: int = 0  # minutes
    points: int = 0


class ExportMeta(_ExportModel):
    """Export header: who exported what date range, and when."""

    user: ExportUser
    from_: datetime = Field(alias="from")
    to: datetime
    exported_at: datetime


class TrainStop(_ExportModel):
    """Origin or destination of a check-in, with planned and real times."""

    id: int | None = None
    name: str
    arrival: datetime
    arrival_planned: datetime | None = None
    arrival_real: datetime | None = None
    departure: datetime
    departure_planned: datetime | None = None
    departure_real: datetime | None = None
    cancelled: bool = False


class TrainOperator(_ExportModel):
    """Operator as reported by Träwelling; usually missing for local transit."""

    identifier: str = ""
    name: str


class Train(_ExportModel):
    """The travelled section of a check-in. Buses and trams are 'trains' too."""

    category: str
    number: str = ""
    line_name: str
    journey_number: int | None = None
    distance: int = 0  # metres
    points: int = 0
    duration: int = 0  # minutes
    origin: TrainStop
    destination: TrainStop
    operator: TrainOperator | None = None


class Event(_ExportModel):
    """Event a check-in was attached to."""

    id: int
    name: str
    slug: str = ""


class Status(_ExportModel):
    """The check-in itself."""

    id: int
    body: str = ""
    created_at: datetime | None = None
    train: Train
    event: Event | None = None


class TripStation(_ExportModel):
    """First or last station of the whole trip."""

    id: int | None = None
    name: str
    latitude: float | None = None
    longitude: float | None = None
    ibnr: int | None = None


class Stopover(_ExportModel):
    """Intermediate stop of a trip."""

    id: int | None = None
    name: str


class Trip(_ExportModel):
    """The complete journey of the vehicle the user checked into."""

    id: int
    category: str
    number: str = ""
    line_name: str
    origin: TripStation
    destination: TripStation
    stopovers: list[Stopover] = Field(default_factory=list)


class CheckInEntry(_ExportModel):
    """One entry of the export's data array."""

    status: Status
    trip: Trip

    @property
    def trip_identity(self) -> TripIdentity:
        """Line and trip endpoints used for operator classification."""
        return TripIdentity(
            line_name=self.trip.line_name,
            origin=self.trip.origin.name,
            destination=self.trip.destination.name,
        )

    @property
    def upstream_operator(self) -> str | None:
        """Operator name supplied by Träwelling, if any."""
        operator = self.status.train.operator
        return operator.name if operator is not None else None


class TraewellingExport(_ExportModel):
    """A complete export file."""

    meta: ExportMeta
    entries: list[CheckInEntry] = Field(alias="data")
