"""Pydantic models for NDB API responses.

Each of the three endpoints decodes into its own top-level model. Together
they form the ``ApiResult`` union that the CLI renders.
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class NdbModel(BaseModel):
    """Base for NDB payloads; a null optional field decodes to its default."""

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, value: object, info: ValidationInfo) -> object:
        if value is not None or info.field_name is None:
            return value
        field = cls.model_fields[info.field_name]
        if field.is_required():
            return value
        return field.get_default(call_default_factory=True)


class FoodListItem(NdbModel):
    """Entry of the ``/list/`` response."""

    offset: int = 0
    id: str
    name: str = ""


class FoodListPage(NdbModel):
    """The ``list`` object of the ``/list/`` response."""

    lt: str = ""
    start: int = 0
    end: int = 0
    total: int = 0
    sr: str = ""
    sort: str = ""
    item: list[FoodListItem] = Field(default_factory=list)


class FoodList(NdbModel):
    """Decoded ``/list/`` response."""

    list: FoodListPage


class SearchItem(NdbModel):
    """Entry of the ``/search/`` response."""

    offset: int = 0
    group: str = ""
    name: str = ""
    ndbno: str
    ds: str = ""
    manu: str = ""


class SearchPage(NdbModel):
    """The ``list`` object of the ``/search/`` response."""

    q: str = ""
    sr: str = ""
    ds: str = ""
    start: int = 0
    end: int = 0
    total: int = 0
    group: str = ""
    sort: str = ""
    item: list[SearchItem] = Field(default_factory=list)


class SearchResults(NdbModel):
    """Decoded ``/search/`` response."""

    list: SearchPage


class FoodDescription(NdbModel):
    """Descriptive metadata of a food in a report."""

    ndbno: str
    name: str = ""
    sd: str = ""
    fg: str = ""
    manu: str = ""
    ds: str = ""
    ru: str = ""


class Nutrient(NdbModel):
    """Nutrient entry of a food report; ``value`` is string-encoded."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    nutrient_id: str
    name: str = ""
    group: str = ""
    unit: str = ""
    value: str = ""


class ReportFood(NdbModel):
    """The ``food`` object of a report entry."""

    sr: str = ""
    type: str = ""
    desc: FoodDescription
    nutrients: list[Nutrient] = Field(default_factory=list)


class ReportEntry(NdbModel):
    """Wrapper around one food in the ``foods`` array."""

    food: ReportFood


class FoodReport(NdbModel):
    """Decoded ``/V2/reports`` response."""

    foods: list[ReportEntry] = Field(default_factory=list)
    count: int = 0
    notfound: int = 0
    api: float = 0


ApiResult = FoodList | SearchResults | FoodReport
