from pydantic import BaseModel, ConfigDict, PositiveInt


class Occurrence(BaseModel):
    model_config = ConfigDict(frozen=True)

    doc_id: str
    frequency: PositiveInt  # times the keyword appears in doc_id

    def __str__(self) -> str:
        return f"({self.doc_id},{self.frequency})"
