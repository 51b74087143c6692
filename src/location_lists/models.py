from pydantic import BaseModel, Field


class Locations(BaseModel):
    """The two location id columns read from an input file, in file order."""
    left: list[int] = Field(default_factory=list)
    right: list[int] = Field(default_factory=list)

    def is_balanced(self) -> bool:
        return len(self.left) == len(self.right)

    def __len__(self) -> int:
        return len(self.left)


class Report(BaseModel):
    distance_sum: int
    similarity_score: int
    rows: int
