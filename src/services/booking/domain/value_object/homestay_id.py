from dataclasses import dataclass


@dataclass(frozen=True)
class HomestayId:
    """宿泊施設（ホームステイ）ID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("HomestayId cannot be empty")

    def __str__(self) -> str:
        return self.value
