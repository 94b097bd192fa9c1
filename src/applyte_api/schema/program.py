from typing import Any

from .common import AddressData, LinkData, RequestData


class AreaData(RequestData):
    name: str | None = None
    desc: str | None = None
    faculties: list[str] | None = None


class RankingData(RequestData):
    source: str | None = None
    rank: float | None = None


class DeadlineData(RequestData):
    semester: str | None = None
    type: str | None = None
    deadline: str | None = None


class AmountData(RequestData):
    type: str | None = None
    desc: str | None = None
    amount: float | None = None


class FinancialsData(RequestData):
    tuition: float | None = None
    fundings: list[AmountData] | None = None
    cost: list[AmountData] | None = None


class RequirementsData(RequestData):
    sop: str | None = None
    fee: float | None = None
    toefl: dict[str, Any] | None = None
    gre: dict[str, Any] | None = None
    greSubject: dict[str, Any] | None = None
    transcripts: list[dict[str, Any]] | None = None
    recommendation: dict[str, Any] | None = None


class ProgramContactData(RequestData):
    fax: str | None = None
    phone: str | None = None
    email: str | None = None
    address: AddressData | None = None


class ProgramData(RequestData):
    name: str | None = None
    degree: str | None = None
    level: str | None = None
    desc: str | None = None
    schoolId: str | None = None
    department: str | None = None
    faculty: str | None = None
    areas: list[AreaData] | None = None
    ranking: RankingData | None = None
    deadlines: list[DeadlineData] | None = None
    links: list[LinkData] | None = None
    financials: FinancialsData | None = None
    reqs: RequirementsData | None = None
    contact: ProgramContactData | None = None
    tags: list[str] | None = None


class AreaCategoryData(RequestData):
    name: str | None = None
    desc: str | None = None
