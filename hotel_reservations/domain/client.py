from pydantic import BaseModel, ConfigDict, Field


class Client(BaseModel):
    """Клиент отеля (Value Object).

    Два клиента равны, если совпадают имя, возраст и рост.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    age: int = Field(..., ge=0)
    height: int = Field(..., ge=0)

    def __str__(self) -> str:
        return f"{self.name} ({self.age} лет, {self.height} см)"
