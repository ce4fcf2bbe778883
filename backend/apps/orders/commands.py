from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass
class DeliveryCommand:
    city: str
    address: str
    postcode: str
    tel: str

    @staticmethod
    def from_validated(data: Dict[str, Any]) -> "DeliveryCommand":
        return DeliveryCommand(
            city=data["city"].strip(),
            address=data["address"].strip(),
            postcode=data["postcode"].strip(),
            tel=data["tel"].strip(),
        )

    def as_fields(self) -> Dict[str, str]:
        return asdict(self)
