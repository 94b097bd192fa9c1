from .common import AddressData, RequestData


class UserNameData(RequestData):
    first: str | None = None
    middle: str | None = None
    last: str | None = None
    preferred: str | None = None


class UserContactData(RequestData):
    email: str | None = None
    phone: str | None = None
    address: AddressData | None = None


class UserData(RequestData):
    username: str | None = None
    name: UserNameData | None = None
    birthday: str | None = None
    contact: UserContactData | None = None
    accessRights: str | None = None
    verified: bool | None = None
    password: str | None = None


class FacultyNameData(RequestData):
    first: str | None = None
    middle: str | None = None
    last: str | None = None
    prefix: str | None = None


class OfficeData(RequestData):
    building: str | None = None
    room: str | None = None


class FacultyContactData(RequestData):
    email: str | None = None
    phone: str | None = None
    office: OfficeData | None = None


class FacultyData(RequestData):
    name: FacultyNameData | None = None
    title: str | None = None
    department: str | None = None
    bio: str | None = None
    homepage: str | None = None
    contact: FacultyContactData | None = None
