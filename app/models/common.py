from pydantic import BaseModel

class APIMessage(BaseModel):
    message: str

class FieldError(BaseModel):
    """One violated constraint. An empty list of these means success."""
    field: str
    message: str
