# winway/profile/schemas.py
from winway.records.schemas import CamelModel


class Profile(CamelModel):
    image_uri: str | None = None
    user_name: str | None = None
