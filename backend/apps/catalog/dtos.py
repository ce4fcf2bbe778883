from dataclasses import dataclass


@dataclass
class ProductDTO:
    id: int
    name: str
    category: str
    price: str
    stock: int
    image: str


"""DTO dataclasses only. Mapping logic lives in mappers.py."""
