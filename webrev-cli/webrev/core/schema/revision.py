from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Hash:
    hex: str

    def __str__(self) -> str:
        return self.hex
