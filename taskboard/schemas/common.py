from pydantic import BaseModel


class IdOut(BaseModel):
    id: int
