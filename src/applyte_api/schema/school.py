from .common import AddressData, LinkData, RequestData


class GalleryItemData(RequestData):
    title: str | None = None
    caption: str | None = None
    location: str | None = None


class SchoolData(RequestData):
    name: str | None = None
    campus: str | None = None
    desc: str | None = None
    email: str | None = None
    phone: str | None = None
    logo: str | None = None
    gallery: list[GalleryItemData] | None = None
    address: AddressData | None = None
    links: list[LinkData] | None = None
