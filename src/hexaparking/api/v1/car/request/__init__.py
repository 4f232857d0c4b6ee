"""Car Request Models."""

from pydantic import Field

from hexaparking.api.v1.common.models import CamelModel
from hexaparking.domain.car import CarData, LicensePlateNumber


class CarRequest(CamelModel):
    """Registration data of one car."""

    license_plate_number: str = Field(
        ...,
        description="License plate number",
        min_length=1,
        json_schema_extra={"example": "123가1234"},
    )

    def to_car_data(self) -> CarData:
        return CarData(license_plate_number=LicensePlateNumber(self.license_plate_number))
